"""Core functionality for ProjectBoard."""

from projectboard.core.connection import DatabaseConnection
from projectboard.core.errors import (
    ProjectBoardError,
    ValidationError,
    NotFoundError,
    StoreError,
)

__all__ = [
    "DatabaseConnection",
    "ProjectBoardError",
    "ValidationError",
    "NotFoundError",
    "StoreError",
]
