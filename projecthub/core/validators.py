"""
Input validators using Pydantic
"""
from datetime import datetime
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from projecthub.core.exceptions import ValidationError
from projecthub.domain.enums import ProjectStatus, TaskPriority, TaskStatus

M = TypeVar('M', bound=BaseModel)


class EntityIdValidator(BaseModel):
    """Entity id validator"""
    id: str = Field(..., min_length=1, max_length=64, description="Entity id")

    @field_validator('id')
    @classmethod
    def validate_id(cls, v):
        if not v.strip():
            raise ValueError('Id cannot be empty')
        return v.strip()


class UserRefInput(BaseModel):
    """Input referencing a user"""
    user_id: str = Field(..., min_length=1)

    @field_validator('user_id')
    @classmethod
    def validate_user_id(cls, v):
        return EntityIdValidator(id=v).id


class ProjectRefInput(BaseModel):
    """Input referencing a project"""
    project_id: str = Field(..., min_length=1)

    @field_validator('project_id')
    @classmethod
    def validate_project_id(cls, v):
        return EntityIdValidator(id=v).id


class CreateProjectInput(UserRefInput):
    """Project creation payload"""
    name: str = Field(..., min_length=1, max_length=100, description="Project name")
    description: Optional[str] = Field(None, max_length=500)
    status: ProjectStatus = ProjectStatus.PLANNING

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Project name cannot be empty')
        return v.strip()


class CreateTaskInput(ProjectRefInput):
    """Task creation payload"""
    title: str = Field(..., min_length=1, max_length=200, description="Task title")
    description: Optional[str] = Field(None, max_length=1000)
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Task title cannot be empty')
        return v.strip()


def parse_input(model: Type[M], data: Any) -> M:
    """
    Validate ``data`` against ``model``.

    Pydantic failures are converted into a ``ValidationError`` naming the
    first offending field.
    """
    if isinstance(data, model):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump()
    if not isinstance(data, dict):
        raise ValidationError("Invalid input")
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        first: Dict[str, Any] = exc.errors()[0]
        loc = first.get("loc") or ()
        field = str(loc[0]) if loc else None
        message = first.get("msg", "Invalid input")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        raise ValidationError(message, field=field) from exc
