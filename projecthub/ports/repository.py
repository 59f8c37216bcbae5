"""Project repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from projecthub.domain.entities import Project, Session, Task, User


class ProjectRepository(ABC):
    """Interface for user/project/task persistence."""

    # Users

    @abstractmethod
    async def create_user(self, user: User) -> User:
        """Insert a user. Duplicate email raises ValidationError(field="email")."""
        raise NotImplementedError

    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    @abstractmethod
    async def get_user_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    # Sessions

    @abstractmethod
    async def create_session(self, session: Session) -> Session:
        """Insert a session for an existing user."""
        raise NotImplementedError

    # Projects

    @abstractmethod
    async def create_project(self, project: Project) -> Project:
        """Insert a project. Unknown owner raises NotFoundError("User")."""
        raise NotImplementedError

    @abstractmethod
    async def get_project(self, project_id: str) -> Optional[Project]:
        raise NotImplementedError

    @abstractmethod
    async def list_projects(self, user_id: str) -> List[Project]:
        """Projects of a user, newest first."""
        raise NotImplementedError

    # Tasks

    @abstractmethod
    async def create_task(self, task: Task) -> Task:
        """Insert a task. Unknown project raises NotFoundError("Project")."""
        raise NotImplementedError

    @abstractmethod
    async def create_tasks(self, tasks: List[Task]) -> int:
        """Insert several tasks; returns the number inserted."""
        raise NotImplementedError

    @abstractmethod
    async def list_tasks(self, project_id: str) -> List[Task]:
        """Tasks of a project in creation order."""
        raise NotImplementedError

    # Bulk reset (dependents first: tasks, projects, sessions, users)

    @abstractmethod
    async def delete_all_tasks(self) -> int:
        raise NotImplementedError

    @abstractmethod
    async def delete_all_projects(self) -> int:
        raise NotImplementedError

    @abstractmethod
    async def delete_all_sessions(self) -> int:
        raise NotImplementedError

    @abstractmethod
    async def delete_all_users(self) -> int:
        raise NotImplementedError

    # Counters

    @abstractmethod
    async def count_users(self) -> int:
        raise NotImplementedError

    @abstractmethod
    async def count_projects(self) -> int:
        raise NotImplementedError

    @abstractmethod
    async def count_tasks(self) -> int:
        raise NotImplementedError

    @abstractmethod
    async def count_sessions(self) -> int:
        raise NotImplementedError

    @abstractmethod
    async def close(self) -> None:
        """Cleanup resources (connections/pools)."""
        raise NotImplementedError
