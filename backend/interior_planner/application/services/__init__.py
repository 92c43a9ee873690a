from .client_service import ClientService
from .project_service import ProjectService
from .room_service import RoomService

__all__ = [
    "ClientService",
    "ProjectService",
    "RoomService",
]
