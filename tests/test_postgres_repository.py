"""Tests for the Postgres adapter against a fake connection pool."""
from unittest.mock import AsyncMock, patch

import asyncpg
import pytest

from projecthub.adapters.postgres_repository import PostgresProjectRepository, _affected
from projecthub.core.exceptions import NotFoundError, ValidationError
from projecthub.domain import Project, User


class FakeAcquire:
    def __init__(self, conn):
        self.conn = conn

    async def __aenter__(self):
        return self.conn

    async def __aexit__(self, *exc):
        return False


class FakePool:
    def __init__(self, conn):
        self.conn = conn
        self.close = AsyncMock()

    def acquire(self):
        return FakeAcquire(self.conn)


@pytest.fixture
def conn():
    return AsyncMock()


@pytest.fixture
def repo(conn):
    return PostgresProjectRepository(FakePool(conn))


class TestPostgresProjectRepository:

    def test_affected_rows(self):
        assert _affected("DELETE 7") == 7
        assert _affected("garbage") == 0

    @pytest.mark.asyncio
    async def test_duplicate_email(self, repo, conn):
        conn.execute.side_effect = asyncpg.UniqueViolationError("duplicate key")
        with pytest.raises(ValidationError) as exc_info:
            await repo.create_user(User(email="a@example.com", password_hash="x"))
        assert exc_info.value.field == "email"

    @pytest.mark.asyncio
    async def test_missing_owner(self, repo, conn):
        conn.execute.side_effect = asyncpg.ForeignKeyViolationError("fk")
        with pytest.raises(NotFoundError):
            await repo.create_project(Project(user_id="ghost", name="P"))

    @pytest.mark.asyncio
    async def test_delete_and_count(self, repo, conn):
        conn.execute.return_value = "DELETE 3"
        conn.fetchval.return_value = 5

        assert await repo.delete_all_tasks() == 3
        assert await repo.count_tasks() == 5
        assert await repo.count_sessions() == 5
        conn.fetchval.assert_awaited_with("SELECT COUNT(*) FROM sessions")
        conn.execute.assert_awaited_with("DELETE FROM tasks")

    @pytest.mark.asyncio
    async def test_get_project_maps_row(self, repo, conn):
        project = Project(user_id="u1", name="P", status="ACTIVE")
        conn.fetchrow.return_value = project.to_dict()

        loaded = await repo.get_project(project.id)

        assert loaded == project

    @pytest.mark.asyncio
    async def test_close(self, repo):
        await repo.close()
        repo.pool.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_closes_pool_when_schema_fails(self, conn):
        pool = FakePool(conn)
        conn.execute.side_effect = asyncpg.PostgresError("permission denied")

        with patch("asyncpg.create_pool", AsyncMock(return_value=pool)):
            with pytest.raises(asyncpg.PostgresError):
                await PostgresProjectRepository.create("postgresql://localhost/projecthub")

        pool.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_keeps_pool_open_on_success(self, conn):
        pool = FakePool(conn)

        with patch("asyncpg.create_pool", AsyncMock(return_value=pool)):
            repo = await PostgresProjectRepository.create("postgresql://localhost/projecthub")

        assert repo.pool is pool
        pool.close.assert_not_awaited()
