"""Pytest configuration and shared fixtures."""

import os
import shutil
import tempfile
from pathlib import Path

import pytest

from projectboard.managers.projects import ProjectManager
from projectboard.models import Project

# Keep the developer's environment out of config loading
for _var in (
    "PORT",
    "PROJECTBOARD_HOST",
    "PROJECTBOARD_DATABASE",
    "PROJECTBOARD_API_URL",
    "PROJECTBOARD_LOG_LEVEL",
    "PROJECTBOARD_PROJECT_DIR",
):
    os.environ.pop(_var, None)


@pytest.fixture
def temp_dir():
    """Create a temporary directory."""
    temp = tempfile.mkdtemp()
    yield Path(temp)
    shutil.rmtree(temp)


@pytest.fixture
def db_path(temp_dir):
    """Path of a fresh database file."""
    return temp_dir / "database.sqlite"


@pytest.fixture
def manager(db_path):
    """A ProjectManager with an initialized schema."""
    mgr = ProjectManager(db_path)
    mgr.init_schema()
    return mgr


@pytest.fixture
def make_project():
    """Build Project instances with sensible defaults."""

    def _make(**overrides):
        fields = {
            "id": 1,
            "title": "Website",
            "description": "",
            "deadline": "2024-12-01",
            "person": "Alice",
            "client": "",
            "contact": "",
            "achievements": 0,
            "price": 0,
            "finished": 0,
        }
        fields.update(overrides)
        return Project(**fields)

    return _make
