"""Postgres adapter for ProjectRepository."""

import logging
from datetime import datetime, timezone
from typing import List, Optional

import asyncpg

from projecthub.core.exceptions import NotFoundError, ValidationError
from projecthub.domain.entities import Project, Session, Task, User
from projecthub.ports.repository import ProjectRepository

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    email TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL,
    name TEXT,
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);
CREATE TABLE IF NOT EXISTS sessions (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL REFERENCES users(id),
    expires_at TIMESTAMPTZ NOT NULL,
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);
CREATE TABLE IF NOT EXISTS projects (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL REFERENCES users(id),
    name TEXT NOT NULL,
    description TEXT,
    status TEXT NOT NULL DEFAULT 'PLANNING'
        CHECK (status IN ('PLANNING', 'ACTIVE', 'COMPLETED', 'ARCHIVED')),
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);
CREATE INDEX IF NOT EXISTS idx_projects_user_id ON projects(user_id);
CREATE TABLE IF NOT EXISTS tasks (
    id TEXT PRIMARY KEY,
    project_id TEXT NOT NULL REFERENCES projects(id),
    title TEXT NOT NULL,
    description TEXT,
    status TEXT NOT NULL DEFAULT 'TODO'
        CHECK (status IN ('TODO', 'IN_PROGRESS', 'DONE')),
    priority TEXT NOT NULL DEFAULT 'MEDIUM'
        CHECK (priority IN ('LOW', 'MEDIUM', 'HIGH')),
    due_date TIMESTAMPTZ,
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);
CREATE INDEX IF NOT EXISTS idx_tasks_project_id ON tasks(project_id);
"""

_TASK_INSERT = """
    INSERT INTO tasks (id, project_id, title, description, status, priority, due_date, created_at, updated_at)
    VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
"""


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _affected(status: str) -> int:
    """Row count from a command tag such as ``DELETE 3``."""
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (ValueError, IndexError):
        return 0


def _task_args(task: Task) -> tuple:
    return (
        task.id,
        task.project_id,
        task.title,
        task.description,
        task.status.value,
        task.priority.value,
        _aware(task.due_date),
        _aware(task.created_at),
        _aware(task.updated_at),
    )


class PostgresProjectRepository(ProjectRepository):
    """Postgres implementation of project repository."""

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool

    @classmethod
    async def create(cls, dsn: str, min_size: int = 1, max_size: int = 10) -> "PostgresProjectRepository":
        """Create repository with connection pool."""
        pool = await asyncpg.create_pool(dsn, min_size=min_size, max_size=max_size)
        repo = cls(pool)
        try:
            await repo._ensure_schema()
        except Exception:
            await pool.close()
            raise
        logger.info("Database connected (pool %s-%s)", min_size, max_size)
        return repo

    async def _ensure_schema(self) -> None:
        """Ensure database schema exists."""
        async with self.pool.acquire() as conn:
            await conn.execute(SCHEMA)

    async def create_user(self, user: User) -> User:
        async with self.pool.acquire() as conn:
            try:
                await conn.execute(
                    """
                    INSERT INTO users (id, email, password_hash, name, created_at, updated_at)
                    VALUES ($1, $2, $3, $4, $5, $6)
                    """,
                    user.id,
                    user.email,
                    user.password_hash,
                    user.name,
                    _aware(user.created_at),
                    _aware(user.updated_at),
                )
            except asyncpg.UniqueViolationError as exc:
                raise ValidationError("Email already registered", field="email") from exc
        return user

    async def get_user(self, user_id: str) -> Optional[User]:
        async with self.pool.acquire() as conn:
            row = await conn.fetchrow("SELECT * FROM users WHERE id = $1", user_id)
        return User.from_dict(dict(row)) if row else None

    async def get_user_by_email(self, email: str) -> Optional[User]:
        async with self.pool.acquire() as conn:
            row = await conn.fetchrow("SELECT * FROM users WHERE email = $1", email)
        return User.from_dict(dict(row)) if row else None

    async def create_session(self, session: Session) -> Session:
        async with self.pool.acquire() as conn:
            try:
                await conn.execute(
                    "INSERT INTO sessions (id, user_id, expires_at, created_at) VALUES ($1, $2, $3, $4)",
                    session.id,
                    session.user_id,
                    _aware(session.expires_at),
                    _aware(session.created_at),
                )
            except asyncpg.ForeignKeyViolationError as exc:
                raise NotFoundError("User") from exc
        return session

    async def create_project(self, project: Project) -> Project:
        async with self.pool.acquire() as conn:
            try:
                await conn.execute(
                    """
                    INSERT INTO projects (id, user_id, name, description, status, created_at, updated_at)
                    VALUES ($1, $2, $3, $4, $5, $6, $7)
                    """,
                    project.id,
                    project.user_id,
                    project.name,
                    project.description,
                    project.status.value,
                    _aware(project.created_at),
                    _aware(project.updated_at),
                )
            except asyncpg.ForeignKeyViolationError as exc:
                raise NotFoundError("User") from exc
        return project

    async def get_project(self, project_id: str) -> Optional[Project]:
        async with self.pool.acquire() as conn:
            row = await conn.fetchrow("SELECT * FROM projects WHERE id = $1", project_id)
        return Project.from_dict(dict(row)) if row else None

    async def list_projects(self, user_id: str) -> List[Project]:
        async with self.pool.acquire() as conn:
            rows = await conn.fetch(
                "SELECT * FROM projects WHERE user_id = $1 ORDER BY created_at DESC",
                user_id,
            )
        return [Project.from_dict(dict(row)) for row in rows]

    async def create_task(self, task: Task) -> Task:
        async with self.pool.acquire() as conn:
            try:
                await conn.execute(_TASK_INSERT, *_task_args(task))
            except asyncpg.ForeignKeyViolationError as exc:
                raise NotFoundError("Project") from exc
        return task

    async def create_tasks(self, tasks: List[Task]) -> int:
        if not tasks:
            return 0
        async with self.pool.acquire() as conn:
            async with conn.transaction():
                try:
                    await conn.executemany(_TASK_INSERT, [_task_args(t) for t in tasks])
                except asyncpg.ForeignKeyViolationError as exc:
                    raise NotFoundError("Project") from exc
        return len(tasks)

    async def list_tasks(self, project_id: str) -> List[Task]:
        async with self.pool.acquire() as conn:
            rows = await conn.fetch(
                "SELECT * FROM tasks WHERE project_id = $1 ORDER BY created_at ASC",
                project_id,
            )
        return [Task.from_dict(dict(row)) for row in rows]

    async def _delete_all(self, table: str) -> int:
        async with self.pool.acquire() as conn:
            status = await conn.execute(f"DELETE FROM {table}")
        return _affected(status)

    async def delete_all_tasks(self) -> int:
        return await self._delete_all("tasks")

    async def delete_all_projects(self) -> int:
        return await self._delete_all("projects")

    async def delete_all_sessions(self) -> int:
        return await self._delete_all("sessions")

    async def delete_all_users(self) -> int:
        return await self._delete_all("users")

    async def _count(self, table: str) -> int:
        async with self.pool.acquire() as conn:
            return await conn.fetchval(f"SELECT COUNT(*) FROM {table}")

    async def count_users(self) -> int:
        return await self._count("users")

    async def count_projects(self) -> int:
        return await self._count("projects")

    async def count_tasks(self) -> int:
        return await self._count("tasks")

    async def count_sessions(self) -> int:
        return await self._count("sessions")

    async def close(self) -> None:
        """Close connection pool."""
        await self.pool.close()
        logger.info("Database disconnected")
