"""Unit tests for the RoomService."""

import pytest

from interior_planner.application.interfaces import RoomRepository
from interior_planner.application.schemas import RoomCreate, RoomUpdate
from interior_planner.application.services import ClientService, ProjectService, RoomService
from interior_planner.domain.entities import RoomType
from interior_planner.domain.exceptions import (
    InvalidArgumentError,
    ProjectNotFoundError,
    RoomNotFoundError,
)


async def _project(client_service: ClientService, project_service: ProjectService, client_data, project_data):
    client = await client_service.create_client(client_data)
    return await project_service.create_project(project_data, client.id)


@pytest.mark.asyncio
async def test_add_room_links_both_sides(
    client_service, project_service, room_service: RoomService, jessica, kitchen_remodel, kitchen
):
    project = await _project(client_service, project_service, jessica, kitchen_remodel)

    room = await room_service.add_room(kitchen, project.id)

    assert room.id is not None
    assert room.project_id == project.id
    assert room.type is RoomType.KITCHEN
    assert (await project_service.get_project(project.id)).room_id == room.id


@pytest.mark.asyncio
async def test_add_room_unknown_project(room_service: RoomService, kitchen):
    with pytest.raises(ProjectNotFoundError, match="projectId: 77"):
        await room_service.add_room(kitchen, 77)


@pytest.mark.asyncio
async def test_add_room_missing_payload(room_service: RoomService):
    with pytest.raises(InvalidArgumentError):
        await room_service.add_room(None, None)


@pytest.mark.asyncio
async def test_add_second_room_to_project_rejected(
    client_service, project_service, room_service: RoomService, jessica, kitchen_remodel, kitchen
):
    project = await _project(client_service, project_service, jessica, kitchen_remodel)
    first = await room_service.add_room(kitchen, project.id)

    with pytest.raises(InvalidArgumentError, match="already has room"):
        await room_service.add_room(kitchen.model_copy(update={"type": RoomType.BEDROOM}), project.id)
    assert [r.id for r in await room_service.list_rooms()] == [first.id]


@pytest.mark.asyncio
async def test_get_room_not_found(room_service: RoomService):
    with pytest.raises(RoomNotFoundError) as exc_info:
        await room_service.get_room(5)
    assert str(exc_info.value) == "Room is not found with roomId: 5"


@pytest.mark.asyncio
async def test_list_rooms_by_type_is_case_insensitive(
    client_service, project_service, room_service: RoomService, jessica, alex, kitchen_remodel, kitchen
):
    first = await _project(client_service, project_service, jessica, kitchen_remodel)
    second = await _project(client_service, project_service, alex, kitchen_remodel)
    kitchen_room = await room_service.add_room(kitchen, first.id)
    await room_service.add_room(kitchen.model_copy(update={"type": RoomType.LIVING_ROOM}), second.id)

    assert [r.id for r in await room_service.list_rooms_by_type(" kitchen")] == [kitchen_room.id]
    assert len(await room_service.list_rooms_by_type("Living_Room")) == 1


@pytest.mark.asyncio
async def test_list_rooms_by_unknown_type(room_service: RoomService):
    with pytest.raises(RoomNotFoundError, match="roomType: ballroom"):
        await room_service.list_rooms_by_type("ballroom")


@pytest.mark.asyncio
async def test_update_room_replaces_specification(
    client_service, project_service, room_service: RoomService, jessica, kitchen_remodel, kitchen
):
    project = await _project(client_service, project_service, jessica, kitchen_remodel)
    room = await room_service.add_room(
        kitchen.model_copy(update={"checklist": ["Measure walls"]}), project.id
    )

    updated = await room_service.update_room(
        room.id,
        RoomUpdate(
            type="bedroom",
            length=5.0,
            width=4.0,
            height=2.4,
            unit="m",
            checklist=["Order bed", "Paint walls"],
            changes=["Switched to bedroom"],
        ),
    )
    assert updated.type is RoomType.BEDROOM
    assert updated.length == 5.0
    assert updated.checklist == ["Order bed", "Paint walls"]
    assert updated.changes == ["Switched to bedroom"]
    assert updated.project_id == project.id


@pytest.mark.asyncio
async def test_update_room_not_found(room_service: RoomService, kitchen):
    with pytest.raises(RoomNotFoundError):
        await room_service.update_room(8, RoomUpdate(**kitchen.model_dump()))


@pytest.mark.asyncio
async def test_reassign_project_moves_both_sides(
    client_service, project_service, room_service: RoomService, jessica, alex, kitchen_remodel, kitchen
):
    source = await _project(client_service, project_service, jessica, kitchen_remodel)
    target = await _project(client_service, project_service, alex, kitchen_remodel)
    room = await room_service.add_room(kitchen, source.id)

    moved = await room_service.reassign_project(target.id, room.id)

    assert moved.project_id == target.id
    assert (await project_service.get_project(target.id)).room_id == room.id
    assert (await project_service.get_project(source.id)).room_id is None


@pytest.mark.asyncio
async def test_reassign_project_to_current_project(
    client_service, project_service, room_service: RoomService, jessica, kitchen_remodel, kitchen
):
    project = await _project(client_service, project_service, jessica, kitchen_remodel)
    room = await room_service.add_room(kitchen, project.id)
    moved = await room_service.reassign_project(project.id, room.id)
    assert moved.project_id == project.id


@pytest.mark.asyncio
async def test_reassign_project_to_project_with_room_rejected(
    client_service, project_service, room_service: RoomService, jessica, alex, kitchen_remodel, kitchen
):
    source = await _project(client_service, project_service, jessica, kitchen_remodel)
    target = await _project(client_service, project_service, alex, kitchen_remodel)
    room = await room_service.add_room(kitchen, source.id)
    await room_service.add_room(kitchen, target.id)

    with pytest.raises(InvalidArgumentError):
        await room_service.reassign_project(target.id, room.id)
    assert (await room_service.get_room(room.id)).project_id == source.id


@pytest.mark.asyncio
async def test_reassign_project_unknown_ids(
    client_service, project_service, room_service: RoomService, jessica, kitchen_remodel, kitchen
):
    project = await _project(client_service, project_service, jessica, kitchen_remodel)
    room = await room_service.add_room(kitchen, project.id)
    with pytest.raises(RoomNotFoundError):
        await room_service.reassign_project(project.id, 999)
    with pytest.raises(ProjectNotFoundError):
        await room_service.reassign_project(999, room.id)


@pytest.mark.asyncio
async def test_delete_room_keeps_project(
    client_service, project_service, room_service: RoomService, jessica, kitchen_remodel, kitchen
):
    project = await _project(client_service, project_service, jessica, kitchen_remodel)
    room = await room_service.add_room(kitchen, project.id)

    assert await room_service.delete_room(room.id) is True
    remaining = await project_service.get_project(project.id)
    assert remaining.room_id is None


@pytest.mark.asyncio
async def test_delete_room_not_found(room_service: RoomService):
    with pytest.raises(RoomNotFoundError):
        await room_service.delete_room(3)


def test_room_create_rejects_non_positive_dimensions():
    with pytest.raises(ValueError):
        RoomCreate(type="KITCHEN", length=0, width=3.0, height=2.5)


def test_room_port_reads_project_link_only_through_projects():
    # A project's room is derived from rooms.project_id by the project store.
    assert RoomRepository.__abstractmethods__ == {
        "get_by_id",
        "get_all",
        "get_by_type",
        "create",
        "update",
        "delete",
    }
