"""Use case for adding a task to a project."""

from typing import Any, Dict

from projecthub.core.exceptions import NotFoundError
from projecthub.core.validators import CreateTaskInput, parse_input
from projecthub.domain.entities import Task
from projecthub.ports.repository import ProjectRepository


class CreateTaskUseCase:
    """Create a task inside an existing project."""

    def __init__(self, repository: ProjectRepository):
        self.repository = repository

    async def execute(self, data: Any) -> Dict[str, Any]:
        payload = parse_input(CreateTaskInput, data)

        if await self.repository.get_project(payload.project_id) is None:
            raise NotFoundError("Project")

        task = Task(
            project_id=payload.project_id,
            title=payload.title,
            description=payload.description,
            status=payload.status,
            priority=payload.priority,
            due_date=payload.due_date,
        )
        await self.repository.create_task(task)
        return task.to_dict()
