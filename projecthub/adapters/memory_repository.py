"""In-memory adapter for ProjectRepository (tests and local runs)."""

from dataclasses import replace
from typing import Dict, List, Optional

from projecthub.core.exceptions import AppError, NotFoundError, ValidationError
from projecthub.domain.entities import Project, Session, Task, User
from projecthub.ports.repository import ProjectRepository

INTEGRITY_ERROR = "INTEGRITY_ERROR"


class InMemoryProjectRepository(ProjectRepository):
    """Keeps entities in dicts and enforces the same references as the SQL schema."""

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._sessions: Dict[str, Session] = {}
        self._projects: Dict[str, Project] = {}
        self._tasks: Dict[str, Task] = {}

    async def create_user(self, user: User) -> User:
        if any(u.email == user.email for u in self._users.values()):
            raise ValidationError("Email already registered", field="email")
        self._users[user.id] = replace(user)
        return user

    async def get_user(self, user_id: str) -> Optional[User]:
        user = self._users.get(user_id)
        return replace(user) if user else None

    async def get_user_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return replace(user)
        return None

    async def create_session(self, session: Session) -> Session:
        if session.user_id not in self._users:
            raise NotFoundError("User")
        self._sessions[session.id] = replace(session)
        return session

    async def create_project(self, project: Project) -> Project:
        if project.user_id not in self._users:
            raise NotFoundError("User")
        self._projects[project.id] = replace(project)
        return project

    async def get_project(self, project_id: str) -> Optional[Project]:
        project = self._projects.get(project_id)
        return replace(project) if project else None

    async def list_projects(self, user_id: str) -> List[Project]:
        # Newest insertion first among equal timestamps
        owned = [p for p in self._projects.values() if p.user_id == user_id][::-1]
        owned.sort(key=lambda p: p.created_at, reverse=True)
        return [replace(p) for p in owned]

    async def create_task(self, task: Task) -> Task:
        if task.project_id not in self._projects:
            raise NotFoundError("Project")
        self._tasks[task.id] = replace(task)
        return task

    async def create_tasks(self, tasks: List[Task]) -> int:
        # All-or-nothing, like a single INSERT statement
        for task in tasks:
            if task.project_id not in self._projects:
                raise NotFoundError("Project")
        for task in tasks:
            self._tasks[task.id] = replace(task)
        return len(tasks)

    async def list_tasks(self, project_id: str) -> List[Task]:
        return [replace(t) for t in self._tasks.values() if t.project_id == project_id]

    async def delete_all_tasks(self) -> int:
        count = len(self._tasks)
        self._tasks.clear()
        return count

    async def delete_all_projects(self) -> int:
        if self._tasks:
            raise AppError("Projects are still referenced by tasks", code=INTEGRITY_ERROR)
        count = len(self._projects)
        self._projects.clear()
        return count

    async def delete_all_sessions(self) -> int:
        count = len(self._sessions)
        self._sessions.clear()
        return count

    async def delete_all_users(self) -> int:
        if self._projects or self._sessions:
            raise AppError("Users are still referenced by projects or sessions", code=INTEGRITY_ERROR)
        count = len(self._users)
        self._users.clear()
        return count

    async def count_users(self) -> int:
        return len(self._users)

    async def count_projects(self) -> int:
        return len(self._projects)

    async def count_tasks(self) -> int:
        return len(self._tasks)

    async def count_sessions(self) -> int:
        return len(self._sessions)

    async def close(self) -> None:
        return None
