from .client import ClientModel
from .project import ProjectModel
from .room import RoomModel

__all__ = [
    "ClientModel",
    "ProjectModel",
    "RoomModel",
]
