"""API routers package."""

from projectboard.api.routers import projects

__all__ = ["projects"]
