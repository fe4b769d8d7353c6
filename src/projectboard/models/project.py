"""Project models for ProjectBoard."""

from typing import Optional, Union
from pydantic import Field
from .base import ProjectBoardBaseModel, ProjectBoardRequestModel


class Project(ProjectBoardBaseModel):
    """A persisted project row."""

    id: int = Field(description="Store-assigned identifier")
    title: str = Field(description="Project title")
    description: Optional[str] = Field(default="", description="Free text description")
    deadline: str = Field(description="Deadline date (YYYY-MM-DD)")
    person: str = Field(description="Person in charge")
    client: Optional[str] = Field(default="", description="Client name")
    contact: Optional[str] = Field(default="", description="Client contact")
    achievements: Optional[float] = Field(default=0, description="Progress percentage")
    price: Optional[float] = Field(default=0, description="Project price")
    finished: int = Field(default=0, description="Completion flag (0 or 1)")


class ProjectCreate(ProjectBoardRequestModel):
    """Request body for creating a project.

    Required fields are optional here; presence is checked by the
    ProjectManager so that a missing field is reported as a 400.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    deadline: Optional[str] = None
    person: Optional[str] = None
    client: Optional[str] = None
    contact: Optional[str] = None
    achievements: Optional[float] = None
    price: Optional[float] = None
    finished: Optional[Union[bool, int]] = None


class ProjectUpdate(ProjectBoardRequestModel):
    """Full replacement record for an existing project."""

    title: Optional[str] = None
    description: Optional[str] = None
    deadline: Optional[str] = None
    person: Optional[str] = None
    client: Optional[str] = None
    contact: Optional[str] = None
    achievements: Optional[float] = None
    price: Optional[float] = None
    finished: Optional[Union[bool, int]] = None
