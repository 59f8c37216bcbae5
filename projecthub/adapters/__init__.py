"""Adapters for external dependencies."""

from urllib.parse import urlparse

from projecthub.core.exceptions import ConfigurationError
from projecthub.ports.repository import ProjectRepository

from .memory_repository import InMemoryProjectRepository

MEMORY_SCHEMES = {"memory"}
POSTGRES_SCHEMES = {"postgres", "postgresql"}


async def create_repository(database_url: str) -> ProjectRepository:
    """Get project repository based on the DATABASE_URL scheme."""
    scheme = urlparse(database_url).scheme.lower()
    if scheme in MEMORY_SCHEMES:
        return InMemoryProjectRepository()
    if scheme in POSTGRES_SCHEMES:
        # Lazy import keeps asyncpg optional for in-memory runs
        from .postgres_repository import PostgresProjectRepository

        return await PostgresProjectRepository.create(database_url)
    raise ConfigurationError(
        "Unsupported DATABASE_URL",
        errors=[{"field": "DATABASE_URL", "message": f"unsupported scheme '{scheme}'"}],
    )


__all__ = ["InMemoryProjectRepository", "create_repository"]
