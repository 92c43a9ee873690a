"""Concrete repository implementation for Client backed by SQLAlchemy."""

import logging
from collections import defaultdict

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from interior_planner.application.interfaces import ClientRepository
from interior_planner.domain.entities import AuditStamp, Client
from interior_planner.infrastructure.database.models import (
    ClientModel,
    ProjectModel,
    RoomModel,
)

logger = logging.getLogger(__name__)


class SQLAlchemyClientRepository(ClientRepository):
    """Implements the ClientRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ClientModel, project_ids: list[int]) -> Client:
        """Map ORM model → domain entity."""
        return Client(
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            phone=model.phone,
            address=model.address,
            notes=model.notes,
            project_ids=tuple(project_ids),
            audit=AuditStamp(
                id=model.id,
                created_at=model.created_at,
                updated_at=model.updated_at,
            ),
        )

    async def _project_ids(self, client_ids: list[int]) -> dict[int, list[int]]:
        """Reverse view: project ids per client, from the client_id index."""
        grouped: dict[int, list[int]] = defaultdict(list)
        if not client_ids:
            return grouped
        result = await self._session.execute(
            select(ProjectModel.client_id, ProjectModel.id)
            .where(ProjectModel.client_id.in_(client_ids))
            .order_by(ProjectModel.id)
        )
        for client_id, project_id in result.all():
            grouped[client_id].append(project_id)
        return grouped

    async def _with_projects(self, models: list[ClientModel]) -> list[Client]:
        project_ids = await self._project_ids([m.id for m in models])
        return [self._to_entity(m, project_ids.get(m.id, [])) for m in models]

    async def get_by_id(self, client_id: int) -> Client | None:
        model = await self._session.get(ClientModel, client_id)
        if model is None:
            return None
        return (await self._with_projects([model]))[0]

    async def get_by_last_name(self, last_name: str) -> Client | None:
        result = await self._session.execute(
            select(ClientModel)
            .where(func.lower(ClientModel.last_name) == last_name.lower())
            .order_by(ClientModel.id)
            .limit(1)
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return (await self._with_projects([model]))[0]

    async def get_all(self) -> list[Client]:
        result = await self._session.execute(
            select(ClientModel).order_by(ClientModel.id)
        )
        return await self._with_projects(list(result.scalars().all()))

    async def create(self, client: Client) -> Client:
        model = ClientModel(
            first_name=client.first_name,
            last_name=client.last_name,
            email=client.email,
            phone=client.phone,
            address=client.address,
            notes=client.notes,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model, [])

    async def update(self, client: Client) -> Client:
        model = await self._session.get(ClientModel, client.id)
        if model is None:
            raise ValueError(f"Client {client.id} not found in database")
        model.first_name = client.first_name
        model.last_name = client.last_name
        model.email = client.email
        model.phone = client.phone
        model.address = client.address
        model.notes = client.notes
        model.updated_at = client.updated_at
        await self._session.flush()
        return (await self._with_projects([model]))[0]

    async def delete(self, client_id: int) -> bool:
        model = await self._session.get(ClientModel, client_id)
        if model is None:
            return False

        project_ids = select(ProjectModel.id).where(ProjectModel.client_id == client_id)
        rooms = await self._session.execute(
            delete(RoomModel).where(RoomModel.project_id.in_(project_ids))
        )
        projects = await self._session.execute(
            delete(ProjectModel).where(ProjectModel.client_id == client_id)
        )
        await self._session.delete(model)
        await self._session.flush()
        logger.info(
            "Cascade-deleted %d project(s) and %d room(s) of client %s",
            projects.rowcount,
            rooms.rowcount,
            client_id,
        )
        return True
