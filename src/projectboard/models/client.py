"""Client summary model for ProjectBoard."""

from pydantic import Field
from .base import ProjectBoardBaseModel


class ClientSummary(ProjectBoardBaseModel):
    """A client derived from the project list. Never persisted."""

    name: str = Field(description="Client name")
    contact: str = Field(default="", description="First non-empty contact seen")
    count: int = Field(default=0, description="Number of projects for this client")
