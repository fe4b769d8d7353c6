"""Managers for ProjectBoard operations."""

from projectboard.managers.projects import ProjectManager
from projectboard.managers.reports import (
    derive_clients,
    completion_summary,
    revenue_by_project,
    deadlines_by_day,
)

__all__ = [
    "ProjectManager",
    "derive_clients",
    "completion_summary",
    "revenue_by_project",
    "deadlines_by_day",
]
