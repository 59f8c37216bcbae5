"""Use case for listing a user's projects."""

from typing import Any, Dict, List

from projecthub.core.exceptions import NotFoundError
from projecthub.core.validators import UserRefInput, parse_input
from projecthub.ports.repository import ProjectRepository


class ListProjectsUseCase:
    """Projects owned by a user, newest first."""

    def __init__(self, repository: ProjectRepository):
        self.repository = repository

    async def execute(self, data: Any) -> List[Dict[str, Any]]:
        payload = parse_input(UserRefInput, data)

        if await self.repository.get_user(payload.user_id) is None:
            raise NotFoundError("User")

        projects = await self.repository.list_projects(payload.user_id)
        return [project.to_dict() for project in projects]
