"""Use case for creating a project."""

from typing import Any, Dict

from projecthub.core.exceptions import NotFoundError
from projecthub.core.validators import CreateProjectInput, parse_input
from projecthub.domain.entities import Project
from projecthub.ports.repository import ProjectRepository


class CreateProjectUseCase:
    """Create a project owned by an existing user."""

    def __init__(self, repository: ProjectRepository):
        self.repository = repository

    async def execute(self, data: Any) -> Dict[str, Any]:
        payload = parse_input(CreateProjectInput, data)

        if await self.repository.get_user(payload.user_id) is None:
            raise NotFoundError("User")

        project = Project(
            user_id=payload.user_id,
            name=payload.name,
            description=payload.description,
            status=payload.status,
        )
        await self.repository.create_project(project)
        return project.to_dict()
