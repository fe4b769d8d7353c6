"""Project management for ProjectBoard - handles CRUD operations on project rows."""

import logging
import sqlite3
from pathlib import Path
from typing import List, Optional, Union

from projectboard.core.connection import DatabaseConnection
from projectboard.core.errors import ValidationError, NotFoundError, StoreError
from projectboard.models import Project, ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)

PROJECTS_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS projects (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        description TEXT,
        deadline TEXT NOT NULL,
        person TEXT NOT NULL,
        client TEXT,
        contact TEXT,
        achievements REAL DEFAULT 0,
        price REAL DEFAULT 0,
        finished INTEGER DEFAULT 0
    )
"""

REQUIRED_FIELDS_MESSAGE = "Title, deadline and person are required"


class ProjectManager:
    """Manages project rows in the store.

    Every operation opens its own connection and runs a single statement,
    followed by a read-back select where the operation returns a row.
    """

    def __init__(self, db_path: Path):
        """Initialize project manager.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = Path(db_path)

    def init_schema(self) -> None:
        """Create the projects table if it doesn't exist.

        Raises:
            StoreError: If the database cannot be opened or written
        """
        try:
            with DatabaseConnection(self.db_path) as conn:
                conn.execute(PROJECTS_TABLE_SQL)
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Could not initialize database at {self.db_path}: {e}")
            raise StoreError("Database error") from e
        logger.info(f"Connected to SQLite database at {self.db_path}")

    def list_projects(self) -> List[Project]:
        """Return all projects in insertion order.

        Raises:
            StoreError: If the select fails
        """
        try:
            with DatabaseConnection(self.db_path) as conn:
                rows = conn.fetch_all("SELECT * FROM projects")
        except sqlite3.Error as e:
            logger.error(f"Failed to list projects: {e}")
            raise StoreError("Database error") from e

        return [Project(**dict(row)) for row in rows]

    def get_project(self, project_id: int) -> Project:
        """Fetch a single project by ID.

        Raises:
            NotFoundError: If no row matches project_id
            StoreError: If the select fails
        """
        try:
            with DatabaseConnection(self.db_path) as conn:
                row = self._fetch_row(conn, project_id)
        except sqlite3.Error as e:
            logger.error(f"Failed to retrieve project {project_id}: {e}")
            raise StoreError("Database retrieval error") from e

        if row is None:
            raise NotFoundError(f"Project {project_id} not found")
        return Project(**dict(row))

    def create_project(self, data: Union[ProjectCreate, dict]) -> Project:
        """Insert a new project and return the persisted row.

        Args:
            data: Candidate record without an id

        Returns:
            The stored project, with its assigned id and defaults applied

        Raises:
            ValidationError: If title, deadline or person is missing or empty
            StoreError: If the insert or read-back fails
        """
        if isinstance(data, dict):
            data = ProjectCreate(**data)

        if not data.title or not data.deadline or not data.person:
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

        params = (
            data.title,
            data.description or "",
            data.deadline,
            data.person,
            data.client or "",
            data.contact or "",
            data.achievements or 0,
            data.price or 0,
            1 if data.finished else 0,
        )

        with DatabaseConnection(self.db_path) as conn:
            try:
                cursor = conn.execute(
                    """
                    INSERT INTO projects (title, description, deadline, person, client,
                                          contact, achievements, price, finished)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    params,
                )
                conn.commit()
            except sqlite3.Error as e:
                conn.rollback()
                logger.error(f"Failed to insert project: {e}")
                raise StoreError("Database insertion error") from e

            project_id = cursor.lastrowid
            try:
                row = self._fetch_row(conn, project_id)
            except sqlite3.Error as e:
                logger.error(f"Failed to retrieve project {project_id}: {e}")
                raise StoreError("Database retrieval error") from e

        logger.debug(f"Created project {project_id}")
        return Project(**dict(row))

    def update_project(self, project_id: int, data: Union[ProjectUpdate, dict]) -> Project:
        """Overwrite every field of a project and return the updated row.

        No presence checks are applied. Omitted fields are written as NULL.

        Raises:
            NotFoundError: If no row matches project_id
            StoreError: If the update or read-back fails
        """
        if isinstance(data, dict):
            data = ProjectUpdate(**data)

        params = (
            data.title,
            data.description,
            data.deadline,
            data.person,
            data.client,
            data.contact,
            data.achievements,
            data.price,
            1 if data.finished else 0,
            project_id,
        )

        with DatabaseConnection(self.db_path) as conn:
            try:
                conn.execute(
                    """
                    UPDATE projects
                    SET title = ?, description = ?, deadline = ?, person = ?, client = ?,
                        contact = ?, achievements = ?, price = ?, finished = ?
                    WHERE id = ?
                    """,
                    params,
                )
                conn.commit()
            except sqlite3.Error as e:
                conn.rollback()
                logger.error(f"Failed to update project {project_id}: {e}")
                raise StoreError("Database update error") from e

            # The update is a no-op for a missing id; the read-back reports it
            try:
                row = self._fetch_row(conn, project_id)
            except sqlite3.Error as e:
                logger.error(f"Failed to retrieve project {project_id}: {e}")
                raise StoreError("Database retrieval error") from e

        if row is None:
            raise NotFoundError(f"Project {project_id} not found")
        return Project(**dict(row))

    def delete_project(self, project_id: int) -> int:
        """Delete a project by ID.

        Deleting a missing id is not an error.

        Returns:
            Number of rows removed (0 or 1)

        Raises:
            StoreError: If the delete fails
        """
        with DatabaseConnection(self.db_path) as conn:
            try:
                removed = conn.execute(
                    "DELETE FROM projects WHERE id = ?", (project_id,)
                ).rowcount
                conn.commit()
            except sqlite3.Error as e:
                conn.rollback()
                logger.error(f"Failed to delete project {project_id}: {e}")
                raise StoreError("Database deletion error") from e

        if removed == 0:
            logger.debug(f"Delete of project {project_id} matched no row")
        return removed

    def _fetch_row(self, conn: DatabaseConnection, project_id: int) -> Optional[sqlite3.Row]:
        return conn.fetch_one("SELECT * FROM projects WHERE id = ?", (project_id,))
