"""Tests for ProjectManager."""

import sqlite3
from unittest.mock import patch

import pytest

from projectboard.core.errors import NotFoundError, StoreError, ValidationError
from projectboard.managers.projects import ProjectManager
from projectboard.models import ProjectCreate, ProjectUpdate


class TestProjectManager:
    """Test CRUD operations on project rows."""

    def test_init_schema_is_idempotent(self, manager):
        """Test that the schema can be initialized twice."""
        manager.init_schema()
        assert manager.list_projects() == []

    def test_create_applies_defaults(self, manager):
        """Test the defaults of a minimal project."""
        project = manager.create_project(
            {"title": "Website", "deadline": "2024-12-01", "person": "Alice"}
        )

        assert project.id == 1
        assert project.title == "Website"
        assert project.deadline == "2024-12-01"
        assert project.person == "Alice"
        assert project.description == ""
        assert project.client == ""
        assert project.contact == ""
        assert project.achievements == 0
        assert project.price == 0
        assert project.finished == 0

    def test_create_accepts_model(self, manager):
        """Test creating from a ProjectCreate instance with every field."""
        project = manager.create_project(
            ProjectCreate(
                title="Shop",
                description="Online shop",
                deadline="2025-01-15",
                person="Bob",
                client="Acme",
                contact="a@x",
                achievements=42.5,
                price=1200,
                finished=True,
            )
        )

        assert project.description == "Online shop"
        assert project.client == "Acme"
        assert project.contact == "a@x"
        assert project.achievements == 42.5
        assert project.price == 1200
        assert project.finished == 1

    def test_create_assigns_new_ids(self, manager):
        """Test that every project gets a previously unused id."""
        first = manager.create_project({"title": "A", "deadline": "2024-01-01", "person": "P"})
        second = manager.create_project({"title": "B", "deadline": "2024-01-02", "person": "P"})
        assert second.id > first.id

    def test_ids_not_reused_after_delete(self, manager):
        """Test that a deleted id is never handed out again."""
        first = manager.create_project({"title": "A", "deadline": "2024-01-01", "person": "P"})
        manager.delete_project(first.id)

        second = manager.create_project({"title": "B", "deadline": "2024-01-02", "person": "P"})
        assert second.id != first.id

    @pytest.mark.parametrize("missing", ["title", "deadline", "person"])
    def test_create_requires_fields(self, manager, missing):
        """Test that each required field is enforced and nothing is stored."""
        data = {"title": "Website", "deadline": "2024-12-01", "person": "Alice"}
        data[missing] = ""

        with pytest.raises(ValidationError, match="Title, deadline and person are required"):
            manager.create_project(data)

        del data[missing]
        with pytest.raises(ValidationError):
            manager.create_project(data)

        assert manager.list_projects() == []

    def test_list_in_insertion_order(self, manager):
        """Test that list returns rows in the order they were created."""
        for title in ["first", "second", "third"]:
            manager.create_project({"title": title, "deadline": "2024-01-01", "person": "P"})

        titles = [p.title for p in manager.list_projects()]
        assert titles == ["first", "second", "third"]

    def test_get_project(self, manager):
        """Test fetching a single project."""
        created = manager.create_project({"title": "A", "deadline": "2024-01-01", "person": "P"})
        assert manager.get_project(created.id) == created

    def test_get_missing_project(self, manager):
        """Test that a missing id raises NotFoundError."""
        with pytest.raises(NotFoundError):
            manager.get_project(99)

    def test_update_replaces_fields(self, manager):
        """Test that update overwrites every field."""
        created = manager.create_project(
            {"title": "Website", "deadline": "2024-12-01", "person": "Alice"}
        )

        updated = manager.update_project(
            created.id,
            ProjectUpdate(
                title="Website v2",
                description="Redesign",
                deadline="2025-02-01",
                person="Carol",
                client="Beta",
                contact="b@x",
                achievements=80,
                price=500,
                finished=True,
            ),
        )

        assert updated.id == created.id
        assert updated.title == "Website v2"
        assert updated.description == "Redesign"
        assert updated.deadline == "2025-02-01"
        assert updated.person == "Carol"
        assert updated.client == "Beta"
        assert updated.contact == "b@x"
        assert updated.achievements == 80
        assert updated.price == 500
        assert updated.finished == 1

        listed = manager.list_projects()
        assert listed == [updated]

    def test_update_coerces_finished(self, manager):
        """Test that falsy finished values are stored as 0."""
        created = manager.create_project(
            {"title": "A", "deadline": "2024-01-01", "person": "P", "finished": 1}
        )
        data = created.model_dump()
        data["finished"] = False

        assert manager.update_project(created.id, data).finished == 0

    def test_update_does_not_validate_presence(self, manager):
        """Test that optional fields may be cleared on update."""
        created = manager.create_project(
            {"title": "A", "deadline": "2024-01-01", "person": "P", "client": "Acme"}
        )

        updated = manager.update_project(
            created.id, {"title": "A", "deadline": "2024-01-01", "person": "P"}
        )
        assert updated.client is None
        assert updated.price is None

    def test_update_null_required_field_is_store_error(self, manager):
        """Test that the store's NOT NULL constraint surfaces as StoreError."""
        created = manager.create_project({"title": "A", "deadline": "2024-01-01", "person": "P"})

        with pytest.raises(StoreError, match="Database update error"):
            manager.update_project(created.id, {"deadline": "2024-01-01", "person": "P"})

    def test_update_missing_project(self, manager):
        """Test that updating a missing id raises NotFoundError and stores nothing."""
        with pytest.raises(NotFoundError):
            manager.update_project(42, {"title": "A", "deadline": "2024-01-01", "person": "P"})

        assert manager.list_projects() == []

    def test_delete_project(self, manager):
        """Test that delete removes the row."""
        keep = manager.create_project({"title": "keep", "deadline": "2024-01-01", "person": "P"})
        drop = manager.create_project({"title": "drop", "deadline": "2024-01-01", "person": "P"})

        assert manager.delete_project(drop.id) == 1
        assert manager.list_projects() == [keep]

    def test_delete_missing_project_is_noop(self, manager):
        """Test that deleting a missing id succeeds and changes nothing."""
        keep = manager.create_project({"title": "keep", "deadline": "2024-01-01", "person": "P"})

        assert manager.delete_project(999) == 0
        assert manager.list_projects() == [keep]

    def test_delete_twice(self, manager):
        """Test that repeating a delete leaves the same state."""
        created = manager.create_project({"title": "A", "deadline": "2024-01-01", "person": "P"})

        manager.delete_project(created.id)
        after_first = manager.list_projects()
        manager.delete_project(created.id)

        assert manager.list_projects() == after_first == []

    def test_persistence_across_instances(self, db_path, manager):
        """Test that rows survive a new manager on the same file."""
        manager.create_project({"title": "A", "deadline": "2024-01-01", "person": "P"})

        reopened = ProjectManager(db_path)
        assert [p.title for p in reopened.list_projects()] == ["A"]


class TestProjectManagerStoreErrors:
    """Test that store failures are reported as StoreError."""

    def test_list_without_schema(self, db_path):
        """Test listing before the table exists."""
        manager = ProjectManager(db_path)
        with pytest.raises(StoreError, match="Database error"):
            manager.list_projects()

    def test_create_without_schema(self, db_path):
        """Test inserting before the table exists."""
        manager = ProjectManager(db_path)
        with pytest.raises(StoreError, match="Database insertion error"):
            manager.create_project({"title": "A", "deadline": "2024-01-01", "person": "P"})

    def test_delete_without_schema(self, db_path):
        """Test deleting before the table exists."""
        manager = ProjectManager(db_path)
        with pytest.raises(StoreError, match="Database deletion error"):
            manager.delete_project(1)

    def test_connect_failure(self, db_path):
        """Test that a failing connection is reported as StoreError."""
        manager = ProjectManager(db_path)
        with patch(
            "projectboard.core.connection.sqlite3.connect",
            side_effect=sqlite3.OperationalError("unable to open database file"),
        ):
            with pytest.raises(StoreError, match="Database error"):
                manager.create_project({"title": "A", "deadline": "2024-01-01", "person": "P"})
