"""Tests for the domain model and input validators."""
from datetime import datetime, timezone

import pytest

from projecthub.core.exceptions import ValidationError
from projecthub.core.validators import CreateProjectInput, CreateTaskInput, UserRefInput, parse_input
from projecthub.domain import Project, ProjectStatus, Task, TaskPriority, TaskStatus, User


class TestEntities:
    """Entity defaults and enumerations"""

    def test_project_defaults(self):
        project = Project(user_id="u1", name="Roadmap")
        assert project.status is ProjectStatus.PLANNING
        assert project.description is None
        assert len(project.id) == 32

    def test_task_defaults(self):
        task = Task(project_id="p1", title="Write docs")
        assert task.status is TaskStatus.TODO
        assert task.priority is TaskPriority.MEDIUM
        assert task.due_date is None
        assert task.is_open

    def test_status_strings_are_coerced(self):
        project = Project(user_id="u1", name="x", status="ACTIVE")
        task = Task(project_id="p1", title="x", status="DONE", priority="HIGH")
        assert project.status is ProjectStatus.ACTIVE
        assert task.status is TaskStatus.DONE
        assert not task.is_open

    @pytest.mark.parametrize("factory", [
        lambda: Project(user_id="u1", name="x", status="PAUSED"),
        lambda: Task(project_id="p1", title="x", status="BLOCKED"),
        lambda: Task(project_id="p1", title="x", priority="URGENT"),
    ])
    def test_values_outside_enumeration_rejected(self, factory):
        with pytest.raises(ValueError):
            factory()

    def test_user_dict_hides_password_hash(self):
        user = User(email="a@example.com", password_hash="secret", name="A")
        data = user.to_dict()
        assert "password_hash" not in data
        assert data["email"] == "a@example.com"

    def test_task_dict_roundtrip(self):
        task = Task(
            project_id="p1",
            title="Ship",
            priority=TaskPriority.HIGH,
            due_date=datetime(2026, 3, 15, tzinfo=timezone.utc),
        )
        data = task.to_dict()
        assert data["due_date"] == "2026-03-15T00:00:00+00:00"
        assert data["priority"] == "HIGH"

        restored = Task.from_dict(data)
        assert restored == task


class TestValidators:
    """Pydantic inputs converted into the error taxonomy"""

    def test_project_name_is_trimmed(self):
        payload = parse_input(CreateProjectInput, {"user_id": "u1", "name": "  Roadmap  "})
        assert payload.name == "Roadmap"
        assert payload.status is ProjectStatus.PLANNING

    def test_blank_project_name(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_input(CreateProjectInput, {"user_id": "u1", "name": "   "})
        assert exc_info.value.field == "name"
        assert exc_info.value.message == "Project name cannot be empty"

    def test_missing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_input(CreateTaskInput, {"project_id": "p1"})
        assert exc_info.value.field == "title"
        assert exc_info.value.code == "VALIDATION_ERROR"

    def test_invalid_enum(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_input(CreateTaskInput, {"project_id": "p1", "title": "x", "priority": "URGENT"})
        assert exc_info.value.field == "priority"

    def test_due_date_parsed(self):
        payload = parse_input(CreateTaskInput, {"project_id": "p1", "title": "x", "due_date": "2026-03-15T00:00:00Z"})
        assert payload.due_date == datetime(2026, 3, 15, tzinfo=timezone.utc)

    def test_non_mapping_input(self):
        with pytest.raises(ValidationError):
            parse_input(UserRefInput, "u1")

    def test_model_instance_passthrough(self):
        payload = UserRefInput(user_id="u1")
        assert parse_input(UserRefInput, payload) is payload
