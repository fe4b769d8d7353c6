"""Client-side snapshot of the project list."""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Set

from projectboard.client.api import APIError, ProjectClient
from projectboard.models import Project

logger = logging.getLogger(__name__)


class ProjectState:
    """Holds the ordered project snapshot and keeps it in sync with the API.

    The snapshot only changes after the server confirms a mutation. Failed
    calls are logged and leave the snapshot untouched. Mutations of the same
    project are single-flight: a second call on an id that is still in
    flight is dropped.
    """

    def __init__(self, client: ProjectClient):
        self.client = client
        self._projects: List[Project] = []
        self._in_flight: Set[int] = set()
        self._lock = threading.Lock()

    @property
    def projects(self) -> List[Project]:
        """A copy of the current snapshot."""
        with self._lock:
            return [project.model_copy() for project in self._projects]

    def get(self, project_id: int) -> Optional[Project]:
        """Return a copy of the project with the given id, if present."""
        with self._lock:
            for project in self._projects:
                if project.id == project_id:
                    return project.model_copy()
        return None

    def refresh(self) -> bool:
        """Replace the snapshot with the server's project list."""
        try:
            projects = self.client.list_projects()
        except APIError as e:
            logger.error(f"Failed to load projects: {e}")
            return False

        with self._lock:
            self._projects = projects
        return True

    def add(self, record: Dict[str, Any]) -> Optional[Project]:
        """Create a project and append the server-confirmed row."""
        try:
            created = self.client.create_project(record)
        except APIError as e:
            logger.error(f"Failed to add project: {e}")
            return None

        with self._lock:
            self._projects.append(created)
        return created.model_copy()

    def toggle_finish(self, project: Project) -> Optional[Project]:
        """Flip a project's finished flag and store the confirmed row."""
        updated = project.model_dump()
        updated["finished"] = 0 if project.finished else 1

        with self._single_flight(project.id) as acquired:
            if not acquired:
                return None
            try:
                confirmed = self.client.update_project(project.id, updated)
            except APIError as e:
                logger.error(f"Failed to update project {project.id}: {e}")
                return None

        with self._lock:
            self._projects = [
                confirmed if p.id == confirmed.id else p for p in self._projects
            ]
        return confirmed.model_copy()

    def remove(self, project_id: int) -> bool:
        """Delete a project and drop it from the snapshot."""
        with self._single_flight(project_id) as acquired:
            if not acquired:
                return False
            try:
                self.client.delete_project(project_id)
            except APIError as e:
                logger.error(f"Failed to delete project {project_id}: {e}")
                return False

        with self._lock:
            self._projects = [p for p in self._projects if p.id != project_id]
        return True

    @contextmanager
    def _single_flight(self, project_id: int) -> Iterator[bool]:
        with self._lock:
            if project_id in self._in_flight:
                logger.warning(
                    f"Ignoring request for project {project_id}: another one is in flight"
                )
                acquired = False
            else:
                self._in_flight.add(project_id)
                acquired = True

        try:
            yield acquired
        finally:
            if acquired:
                with self._lock:
                    self._in_flight.discard(project_id)
