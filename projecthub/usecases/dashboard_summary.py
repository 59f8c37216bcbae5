"""Use case for the dashboard overview."""

from typing import Any, Dict

from projecthub.core.exceptions import NotFoundError
from projecthub.core.validators import UserRefInput, parse_input
from projecthub.domain.enums import ProjectStatus, TaskPriority, TaskStatus
from projecthub.ports.repository import ProjectRepository


class DashboardSummaryUseCase:
    """Counts of a user's projects and tasks by status."""

    def __init__(self, repository: ProjectRepository):
        self.repository = repository

    async def execute(self, data: Any) -> Dict[str, Any]:
        payload = parse_input(UserRefInput, data)

        if await self.repository.get_user(payload.user_id) is None:
            raise NotFoundError("User")

        projects_by_status = {status.value: 0 for status in ProjectStatus}
        tasks_by_status = {status.value: 0 for status in TaskStatus}
        open_high_priority = 0

        projects = await self.repository.list_projects(payload.user_id)
        for project in projects:
            projects_by_status[project.status.value] += 1
            for task in await self.repository.list_tasks(project.id):
                tasks_by_status[task.status.value] += 1
                if task.is_open and task.priority == TaskPriority.HIGH:
                    open_high_priority += 1

        return {
            "projects": {"total": len(projects), "by_status": projects_by_status},
            "tasks": {"total": sum(tasks_by_status.values()), "by_status": tasks_by_status},
            "open_high_priority": open_high_priority,
        }
