from .client_repository import ClientRepository
from .project_repository import ProjectRepository
from .room_repository import RoomRepository

__all__ = [
    "ClientRepository",
    "ProjectRepository",
    "RoomRepository",
]
