"""
Domain entities
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from .enums import ProjectStatus, TaskPriority, TaskStatus


def new_id() -> str:
    """Generate an opaque entity id."""
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_datetime(value: Union[str, datetime, None]) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


def _format_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass
class User:
    """Account owning projects"""
    email: str
    password_hash: str
    name: Optional[str] = None
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def to_dict(self) -> Dict[str, Any]:
        """Public representation; the password hash is never exposed."""
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "created_at": _format_datetime(self.created_at),
            "updated_at": _format_datetime(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=data["id"],
            email=data["email"],
            password_hash=data.get("password_hash", ""),
            name=data.get("name"),
            created_at=_parse_datetime(data.get("created_at")) or utcnow(),
            updated_at=_parse_datetime(data.get("updated_at")) or utcnow(),
        )


@dataclass
class Project:
    """Project belonging to a single user"""
    user_id: str
    name: str
    description: Optional[str] = None
    status: ProjectStatus = ProjectStatus.PLANNING
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        # Raises ValueError for anything outside the enumeration
        self.status = ProjectStatus(self.status)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "created_at": _format_datetime(self.created_at),
            "updated_at": _format_datetime(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        return cls(
            id=data["id"],
            user_id=data["user_id"],
            name=data["name"],
            description=data.get("description"),
            status=data.get("status", ProjectStatus.PLANNING),
            created_at=_parse_datetime(data.get("created_at")) or utcnow(),
            updated_at=_parse_datetime(data.get("updated_at")) or utcnow(),
        )


@dataclass
class Task:
    """Unit of work inside a project"""
    project_id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = None
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        self.status = TaskStatus(self.status)
        self.priority = TaskPriority(self.priority)
        self.due_date = _parse_datetime(self.due_date)

    @property
    def is_open(self) -> bool:
        return self.status != TaskStatus.DONE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "project_id": self.project_id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.value,
            "due_date": _format_datetime(self.due_date),
            "created_at": _format_datetime(self.created_at),
            "updated_at": _format_datetime(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        return cls(
            id=data["id"],
            project_id=data["project_id"],
            title=data["title"],
            description=data.get("description"),
            status=data.get("status", TaskStatus.TODO),
            priority=data.get("priority", TaskPriority.MEDIUM),
            due_date=data.get("due_date"),
            created_at=_parse_datetime(data.get("created_at")) or utcnow(),
            updated_at=_parse_datetime(data.get("updated_at")) or utcnow(),
        )


@dataclass
class Session:
    """Login session; issued by the auth layer, cleared by the seed bootstrap"""
    user_id: str
    expires_at: datetime
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
