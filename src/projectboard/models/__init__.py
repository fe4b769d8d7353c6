"""Core data models for ProjectBoard."""

from .base import ProjectBoardBaseModel, ProjectBoardRequestModel
from .project import Project, ProjectCreate, ProjectUpdate
from .client import ClientSummary

__all__ = [
    "ProjectBoardBaseModel",
    "ProjectBoardRequestModel",
    "Project",
    "ProjectCreate",
    "ProjectUpdate",
    "ClientSummary",
]
