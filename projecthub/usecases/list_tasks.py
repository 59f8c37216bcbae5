"""Use case for listing tasks of a project."""

from typing import Any, Dict, List

from projecthub.core.exceptions import NotFoundError
from projecthub.core.validators import ProjectRefInput, parse_input
from projecthub.ports.repository import ProjectRepository


class ListTasksUseCase:
    """Tasks of a project in creation order."""

    def __init__(self, repository: ProjectRepository):
        self.repository = repository

    async def execute(self, data: Any) -> List[Dict[str, Any]]:
        payload = parse_input(ProjectRefInput, data)

        if await self.repository.get_project(payload.project_id) is None:
            raise NotFoundError("Project")

        tasks = await self.repository.list_tasks(payload.project_id)
        return [task.to_dict() for task in tasks]
