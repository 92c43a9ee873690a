"""Application service (use case) for Project operations.

Owns the status lookup, the completion timestamp rule and moving a project
between clients. Client existence is always checked through ClientService.
"""

import logging

from interior_planner.application.interfaces import ProjectRepository
from interior_planner.application.schemas import ProjectCreate, ProjectUpdate
from interior_planner.application.services.client_service import ClientService
from interior_planner.domain.entities import Project, ProjectDeadline, ProjectStatus
from interior_planner.domain.exceptions import InvalidArgumentError, ProjectNotFoundError

logger = logging.getLogger(__name__)


class ProjectService:
    """Orchestrates project lifecycle logic on top of the client service."""

    def __init__(self, repository: ProjectRepository, client_service: ClientService):
        self._repository = repository
        self._client_service = client_service

    async def get_project(self, project_id: int | None) -> Project:
        project = (
            await self._repository.get_by_id(project_id)
            if project_id is not None
            else None
        )
        if project is None:
            raise ProjectNotFoundError("projectId", project_id)
        return project

    async def list_projects(self) -> list[Project]:
        return await self._repository.get_all()

    async def list_projects_by_status(self, status: str) -> list[Project]:
        """Match ``status`` case-insensitively against ProjectStatus names."""
        resolved = ProjectStatus.from_name(status)
        if resolved is None:
            raise ProjectNotFoundError("projectStatus", status)
        return await self._repository.get_by_status(resolved)

    async def list_deadlines(self) -> list[ProjectDeadline]:
        return await self._repository.get_deadlines()

    async def list_client_projects(self, client_id: int) -> list[Project]:
        client = await self._client_service.get_client(client_id)
        return await self._repository.get_by_client(client.id)

    async def create_project(
        self, data: ProjectCreate | None, client_id: int
    ) -> Project:
        if data is None:
            raise InvalidArgumentError("Project must not be null")
        client = await self._client_service.get_client(client_id)

        project = Project(
            client_id=client.id,
            name=data.name,
            status=data.status,
            budget=data.budget,
            start_date=data.start_date,
            due_date=data.due_date,
            description=data.description,
            meeting_url=data.meeting_url,
        )
        project.audit.stamp_created()
        created = await self._repository.create(project)
        logger.info("Created project %s for client %s", created.id, client.id)
        return created

    async def update_project(self, project_id: int, data: ProjectUpdate) -> Project:
        """Replace the project's fields.

        When the resulting status is COMPLETED, or no completion time has been
        recorded yet, ``completed_at`` is set to the current time.
        """
        project = await self.get_project(project_id)

        client_id = None
        if data.client_id is not None:
            client_id = (await self._client_service.get_client(data.client_id)).id

        project.update(
            name=data.name,
            status=data.status,
            budget=data.budget,
            start_date=data.start_date,
            due_date=data.due_date,
            meeting_url=data.meeting_url,
            description=data.description,
            client_id=client_id,
        )
        project.audit.touch()
        return await self._repository.update(project)

    async def reassign_client(self, project_id: int, client_id: int) -> Project:
        project = await self.get_project(project_id)
        client = await self._client_service.get_client(client_id)

        previous = project.client_id
        project.reassign_client(client.id)
        project.audit.touch()
        updated = await self._repository.update(project)
        logger.info(
            "Reassigned project %s from client %s to client %s",
            project_id,
            previous,
            client.id,
        )
        return updated

    async def delete_project(self, project_id: int) -> bool:
        exists = await self._repository.get_by_id(project_id)
        if exists is None:
            raise ProjectNotFoundError("projectId", project_id)
        deleted = await self._repository.delete(project_id)
        logger.info("Deleted project %s (room: %s)", project_id, exists.room_id)
        return deleted
