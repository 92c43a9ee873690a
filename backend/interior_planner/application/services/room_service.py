"""Application service (use case) for Room operations."""

import logging

from interior_planner.application.interfaces import RoomRepository
from interior_planner.application.schemas import RoomCreate, RoomUpdate
from interior_planner.application.services.project_service import ProjectService
from interior_planner.domain.entities import Project, Room, RoomType
from interior_planner.domain.exceptions import InvalidArgumentError, RoomNotFoundError

logger = logging.getLogger(__name__)


class RoomService:
    """Manages room specifications and their one-to-one link to a project."""

    def __init__(self, repository: RoomRepository, project_service: ProjectService):
        self._repository = repository
        self._project_service = project_service

    async def get_room(self, room_id: int) -> Room:
        room = await self._repository.get_by_id(room_id)
        if room is None:
            raise RoomNotFoundError("roomId", room_id)
        return room

    async def list_rooms(self) -> list[Room]:
        return await self._repository.get_all()

    async def list_rooms_by_type(self, room_type: str) -> list[Room]:
        resolved = RoomType.from_name(room_type)
        if resolved is None:
            raise RoomNotFoundError("roomType", room_type)
        return await self._repository.get_by_type(resolved)

    async def add_room(self, data: RoomCreate | None, project_id: int | None) -> Room:
        """Create a room and link it to a project.

        The link is the room's ``project_id``; the project's room reference is
        read back from it, so both sides are written by the same statement.
        """
        if data is None:
            raise InvalidArgumentError("Room must not be null")
        project = await self._project_service.get_project(project_id)
        self._ensure_room_free(project)

        room = Room(
            project_id=project.id,
            type=data.type,
            length=data.length,
            width=data.width,
            height=data.height,
            unit=data.unit,
            checklist=list(data.checklist),
            changes=list(data.changes),
        )
        room.audit.stamp_created()
        created = await self._repository.create(room)
        logger.info("Added room %s (%s) to project %s", created.id, created.type.value, project.id)
        return created

    async def update_room(self, room_id: int, data: RoomUpdate) -> Room:
        room = await self.get_room(room_id)
        room.update(
            type=data.type,
            length=data.length,
            width=data.width,
            height=data.height,
            unit=data.unit,
            checklist=data.checklist,
            changes=data.changes,
        )
        room.audit.touch()
        return await self._repository.update(room)

    async def reassign_project(self, project_id: int, room_id: int) -> Room:
        room = await self.get_room(room_id)
        project = await self._project_service.get_project(project_id)
        self._ensure_room_free(project, allow_room_id=room.id)

        previous = room.project_id
        room.move_to(project.id)
        room.audit.touch()
        updated = await self._repository.update(room)
        logger.info(
            "Reassigned room %s from project %s to project %s",
            room_id,
            previous,
            project.id,
        )
        return updated

    async def delete_room(self, room_id: int) -> bool:
        exists = await self._repository.get_by_id(room_id)
        if exists is None:
            raise RoomNotFoundError("roomId", room_id)
        deleted = await self._repository.delete(room_id)
        logger.info("Deleted room %s from project %s", room_id, exists.project_id)
        return deleted

    @staticmethod
    def _ensure_room_free(project: Project, allow_room_id: int | None = None) -> None:
        if project.room_id is not None and project.room_id != allow_room_id:
            raise InvalidArgumentError(
                f"Project {project.id} already has room {project.room_id}"
            )
