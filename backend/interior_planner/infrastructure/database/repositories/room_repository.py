"""Concrete repository implementation for Room backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from interior_planner.application.interfaces import RoomRepository
from interior_planner.domain.entities import AuditStamp, Room, RoomType
from interior_planner.infrastructure.database.models import RoomModel


class SQLAlchemyRoomRepository(RoomRepository):
    """Implements the RoomRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: RoomModel) -> Room:
        """Map ORM model → domain entity."""
        return Room(
            project_id=model.project_id,
            type=RoomType(model.type),
            length=model.length,
            width=model.width,
            height=model.height,
            unit=model.unit,
            checklist=list(model.checklist or []),
            changes=list(model.changes or []),
            audit=AuditStamp(
                id=model.id,
                created_at=model.created_at,
                updated_at=model.updated_at,
            ),
        )

    async def get_by_id(self, room_id: int) -> Room | None:
        model = await self._session.get(RoomModel, room_id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Room]:
        result = await self._session.execute(select(RoomModel).order_by(RoomModel.id))
        return [self._to_entity(m) for m in result.scalars().all()]

    async def get_by_type(self, room_type: RoomType) -> list[Room]:
        result = await self._session.execute(
            select(RoomModel)
            .where(RoomModel.type == room_type.value)
            .order_by(RoomModel.id)
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def create(self, room: Room) -> Room:
        model = RoomModel(
            project_id=room.project_id,
            type=room.type.value,
            length=room.length,
            width=room.width,
            height=room.height,
            unit=room.unit,
            checklist=list(room.checklist),
            changes=list(room.changes),
            created_at=room.created_at,
            updated_at=room.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, room: Room) -> Room:
        model = await self._session.get(RoomModel, room.id)
        if model is None:
            raise ValueError(f"Room {room.id} not found in database")
        model.project_id = room.project_id
        model.type = room.type.value
        model.length = room.length
        model.width = room.width
        model.height = room.height
        model.unit = room.unit
        model.checklist = list(room.checklist)
        model.changes = list(room.changes)
        model.updated_at = room.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, room_id: int) -> bool:
        model = await self._session.get(RoomModel, room_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
