"""Room endpoints: CRUD, type filter and project reassignment."""

from fastapi import APIRouter, Depends, HTTPException, status

from interior_planner.application.schemas import RoomCreate, RoomResponse, RoomUpdate
from interior_planner.application.services import RoomService
from interior_planner.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from interior_planner.infrastructure.dependencies import get_room_service

router = APIRouter(prefix="/rooms", tags=["Rooms"])


@router.get("", response_model=list[RoomResponse])
async def list_rooms(
    service: RoomService = Depends(get_room_service),
) -> list[RoomResponse]:
    """Retrieve every room."""
    rooms = await service.list_rooms()
    return [RoomResponse.model_validate(r, from_attributes=True) for r in rooms]


@router.get("/type/{room_type}", response_model=list[RoomResponse])
async def list_rooms_by_type(
    room_type: str,
    service: RoomService = Depends(get_room_service),
) -> list[RoomResponse]:
    """Retrieve all rooms of a type (case-insensitive)."""
    try:
        rooms = await service.list_rooms_by_type(room_type)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [RoomResponse.model_validate(r, from_attributes=True) for r in rooms]


@router.get("/{room_id}", response_model=RoomResponse)
async def get_room(
    room_id: int,
    service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    """Retrieve a single room by ID."""
    try:
        room = await service.get_room(room_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return RoomResponse.model_validate(room, from_attributes=True)


@router.post(
    "/projects/{project_id}",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_room(
    project_id: int,
    data: RoomCreate,
    service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    """Add a room to an existing project."""
    try:
        room = await service.add_room(data, project_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return RoomResponse.model_validate(room, from_attributes=True)


@router.put("/{room_id}", response_model=RoomResponse)
async def update_room(
    room_id: int,
    data: RoomUpdate,
    service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    """Replace a room's specification."""
    try:
        room = await service.update_room(room_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return RoomResponse.model_validate(room, from_attributes=True)


@router.patch("/{room_id}/projects/{project_id}", response_model=RoomResponse)
async def reassign_project(
    room_id: int,
    project_id: int,
    service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    """Move a room to a different project."""
    try:
        room = await service.reassign_project(project_id, room_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return RoomResponse.model_validate(room, from_attributes=True)


@router.delete("/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_room(
    room_id: int,
    service: RoomService = Depends(get_room_service),
) -> None:
    """Delete a room; its project is left untouched."""
    try:
        await service.delete_room(room_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
