"""Application context: explicit wiring of settings, logger, storage and actions."""

from typing import Optional

from projecthub.adapters import create_repository
from projecthub.config import Settings, get_settings
from projecthub.core.logger import StructuredLogger
from projecthub.ports.repository import ProjectRepository
from projecthub.usecases import (
    CreateProjectUseCase,
    CreateTaskUseCase,
    DashboardSummaryUseCase,
    ListProjectsUseCase,
    ListTasksUseCase,
)
from projecthub.utils.action import WrappedAction, wrap_action
from projecthub.utils.rate_limit import FixedWindowRateLimiter


class Actions:
    """Use cases wrapped into ``ActionResult``-returning callables."""

    def __init__(self, repository: ProjectRepository, logger: StructuredLogger):
        self.create_project: WrappedAction = wrap_action(
            CreateProjectUseCase(repository).execute, logger, action_name="create_project", log_input=True
        )
        self.list_projects: WrappedAction = wrap_action(
            ListProjectsUseCase(repository).execute, logger, action_name="list_projects"
        )
        self.create_task: WrappedAction = wrap_action(
            CreateTaskUseCase(repository).execute, logger, action_name="create_task", log_input=True
        )
        self.list_tasks: WrappedAction = wrap_action(
            ListTasksUseCase(repository).execute, logger, action_name="list_tasks"
        )
        self.dashboard_summary: WrappedAction = wrap_action(
            DashboardSummaryUseCase(repository).execute, logger, action_name="dashboard_summary"
        )


class AppContext:
    """Built once at process start, read-only afterwards, closed at shutdown."""

    def __init__(
        self,
        settings: Settings,
        repository: ProjectRepository,
        logger: Optional[StructuredLogger] = None,
        rate_limiter: Optional[FixedWindowRateLimiter] = None,
    ):
        self.settings = settings
        self.repository = repository
        self.logger = logger or StructuredLogger.from_settings(settings)
        self.rate_limiter = rate_limiter or FixedWindowRateLimiter.from_settings(settings)
        self.actions = Actions(self.repository, self.logger)

    @classmethod
    async def create(
        cls,
        settings: Optional[Settings] = None,
        logger: Optional[StructuredLogger] = None,
    ) -> "AppContext":
        """Load settings (if not given) and open the repository from DATABASE_URL."""
        settings = settings or get_settings()
        repository = await create_repository(settings.database_url)
        context = cls(settings, repository, logger=logger)
        context.logger.info("Application context ready", {
            "node_env": settings.node_env,
            "repository": type(repository).__name__,
        })
        return context

    async def close(self) -> None:
        await self.repository.close()
        self.logger.info("Application context closed")
