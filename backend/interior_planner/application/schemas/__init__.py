from .client import ClientCreate, ClientUpdate, ClientResponse
from .project import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    ProjectDeadlineResponse,
)
from .room import RoomCreate, RoomUpdate, RoomResponse

__all__ = [
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    "ProjectDeadlineResponse",
    "RoomCreate",
    "RoomUpdate",
    "RoomResponse",
]
