"""Client-side access to a ProjectBoard server."""

from projectboard.client.api import APIError, ProjectClient
from projectboard.client.state import ProjectState

__all__ = ["APIError", "ProjectClient", "ProjectState"]
