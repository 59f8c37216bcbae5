"""Use cases for ProjectHub."""

from .create_project import CreateProjectUseCase
from .create_task import CreateTaskUseCase
from .dashboard_summary import DashboardSummaryUseCase
from .list_projects import ListProjectsUseCase
from .list_tasks import ListTasksUseCase

__all__ = [
    "CreateProjectUseCase",
    "CreateTaskUseCase",
    "DashboardSummaryUseCase",
    "ListProjectsUseCase",
    "ListTasksUseCase",
]
