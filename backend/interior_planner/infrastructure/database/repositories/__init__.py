from .client_repository import SQLAlchemyClientRepository
from .project_repository import SQLAlchemyProjectRepository
from .room_repository import SQLAlchemyRoomRepository

__all__ = [
    "SQLAlchemyClientRepository",
    "SQLAlchemyProjectRepository",
    "SQLAlchemyRoomRepository",
]
