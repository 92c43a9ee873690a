"""Abstract repository interface (port) for Room persistence."""

from abc import ABC, abstractmethod

from interior_planner.domain.entities import Room, RoomType


class RoomRepository(ABC):
    """Port for room persistence, implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, room_id: int) -> Room | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Room]:
        ...

    @abstractmethod
    async def get_by_type(self, room_type: RoomType) -> list[Room]:
        ...

    @abstractmethod
    async def create(self, room: Room) -> Room:
        """Persist a new room linked to ``room.project_id``."""
        ...

    @abstractmethod
    async def update(self, room: Room) -> Room:
        """Write the room specification and its project link."""
        ...

    @abstractmethod
    async def delete(self, room_id: int) -> bool:
        """Delete a room. Returns True if deleted, False if not found."""
        ...
