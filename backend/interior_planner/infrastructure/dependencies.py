"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from interior_planner.application.services import (
    ClientService,
    ProjectService,
    RoomService,
)
from interior_planner.infrastructure.database.session import get_db_session
from interior_planner.infrastructure.database.repositories import (
    SQLAlchemyClientRepository,
    SQLAlchemyProjectRepository,
    SQLAlchemyRoomRepository,
)


def _build_client_service(session: AsyncSession) -> ClientService:
    return ClientService(SQLAlchemyClientRepository(session))


def _build_project_service(session: AsyncSession) -> ProjectService:
    return ProjectService(
        SQLAlchemyProjectRepository(session),
        _build_client_service(session),
    )


async def get_client_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ClientService, None]:
    """Provides a ClientService instance with its repository wired up."""
    yield _build_client_service(session)


async def get_project_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProjectService, None]:
    """Provides a ProjectService sharing the request session with its ClientService."""
    yield _build_project_service(session)


async def get_room_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[RoomService, None]:
    """Provides a RoomService; all three repositories share one transaction."""
    yield RoomService(
        SQLAlchemyRoomRepository(session),
        _build_project_service(session),
    )
