"""Concrete repository implementation for Project backed by SQLAlchemy."""

import logging

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from interior_planner.application.interfaces import ProjectRepository
from interior_planner.domain.entities import (
    AuditStamp,
    Project,
    ProjectDeadline,
    ProjectStatus,
)
from interior_planner.infrastructure.database.models import ProjectModel, RoomModel

logger = logging.getLogger(__name__)


class SQLAlchemyProjectRepository(ProjectRepository):
    """Implements the ProjectRepository port using SQLAlchemy async sessions.

    Every read joins ``rooms`` on its unique ``project_id`` to derive the
    project's room reference.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _select() -> Select:
        return select(ProjectModel, RoomModel.id).outerjoin(
            RoomModel, RoomModel.project_id == ProjectModel.id
        )

    def _to_entity(self, model: ProjectModel, room_id: int | None) -> Project:
        """Map ORM model → domain entity."""
        return Project(
            client_id=model.client_id,
            name=model.name,
            status=ProjectStatus(model.status),
            budget=model.budget,
            start_date=model.start_date,
            due_date=model.due_date,
            description=model.description,
            meeting_url=model.meeting_url,
            completed_at=model.completed_at,
            room_id=room_id,
            audit=AuditStamp(
                id=model.id,
                created_at=model.created_at,
                updated_at=model.updated_at,
            ),
        )

    async def _fetch(self, stmt: Select) -> list[Project]:
        result = await self._session.execute(stmt)
        return [self._to_entity(model, room_id) for model, room_id in result.all()]

    async def get_by_id(self, project_id: int) -> Project | None:
        projects = await self._fetch(self._select().where(ProjectModel.id == project_id))
        return projects[0] if projects else None

    async def get_all(self) -> list[Project]:
        return await self._fetch(self._select().order_by(ProjectModel.id))

    async def get_by_status(self, status: ProjectStatus) -> list[Project]:
        return await self._fetch(
            self._select()
            .where(ProjectModel.status == status.value)
            .order_by(ProjectModel.id)
        )

    async def get_by_client(self, client_id: int) -> list[Project]:
        return await self._fetch(
            self._select()
            .where(ProjectModel.client_id == client_id)
            .order_by(ProjectModel.id)
        )

    async def get_deadlines(self) -> list[ProjectDeadline]:
        # Null due dates follow the backend's default null ordering.
        result = await self._session.execute(
            select(
                ProjectModel.due_date,
                ProjectModel.start_date,
                ProjectModel.name,
                ProjectModel.status,
                ProjectModel.client_id,
                RoomModel.id,
            )
            .outerjoin(RoomModel, RoomModel.project_id == ProjectModel.id)
            .order_by(ProjectModel.due_date.asc(), ProjectModel.id.asc())
        )
        return [
            ProjectDeadline(
                due_date=due_date,
                start_date=start_date,
                name=name,
                status=ProjectStatus(status),
                client_id=client_id,
                room_id=room_id,
            )
            for due_date, start_date, name, status, client_id, room_id in result.all()
        ]

    async def _room_id(self, project_id: int) -> int | None:
        result = await self._session.execute(
            select(RoomModel.id).where(RoomModel.project_id == project_id)
        )
        return result.scalar_one_or_none()

    async def create(self, project: Project) -> Project:
        model = ProjectModel(
            client_id=project.client_id,
            name=project.name,
            status=project.status.value,
            budget=project.budget,
            start_date=project.start_date,
            due_date=project.due_date,
            description=project.description,
            meeting_url=project.meeting_url,
            completed_at=project.completed_at,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model, None)

    async def update(self, project: Project) -> Project:
        model = await self._session.get(ProjectModel, project.id)
        if model is None:
            raise ValueError(f"Project {project.id} not found in database")
        model.client_id = project.client_id
        model.name = project.name
        model.status = project.status.value
        model.budget = project.budget
        model.start_date = project.start_date
        model.due_date = project.due_date
        model.description = project.description
        model.meeting_url = project.meeting_url
        model.completed_at = project.completed_at
        model.updated_at = project.updated_at
        await self._session.flush()
        return self._to_entity(model, await self._room_id(model.id))

    async def delete(self, project_id: int) -> bool:
        model = await self._session.get(ProjectModel, project_id)
        if model is None:
            return False
        rooms = await self._session.execute(
            delete(RoomModel).where(RoomModel.project_id == project_id)
        )
        await self._session.delete(model)
        await self._session.flush()
        if rooms.rowcount:
            logger.info("Cascade-deleted room of project %s", project_id)
        return True
