"""Shared fixtures: in-memory fake repositories and an SQLite-backed session."""

from dataclasses import replace
from datetime import date

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from interior_planner.application.interfaces import (
    ClientRepository,
    ProjectRepository,
    RoomRepository,
)
from interior_planner.application.schemas import ClientCreate, ProjectCreate, RoomCreate
from interior_planner.application.services import ClientService, ProjectService, RoomService
from interior_planner.domain.entities import (
    AuditStamp,
    Client,
    Project,
    ProjectDeadline,
    ProjectStatus,
    Room,
    RoomType,
)
from interior_planner.infrastructure.database import Base


class FakeStore:
    """Three in-memory tables; reverse references are derived like the database does."""

    def __init__(self):
        self.clients: dict[int, Client] = {}
        self.projects: dict[int, Project] = {}
        self.rooms: dict[int, Room] = {}
        self._next_id = {"clients": 1, "projects": 1, "rooms": 1}

    def next_id(self, table: str) -> int:
        value = self._next_id[table]
        self._next_id[table] += 1
        return value

    def project_ids_for(self, client_id: int) -> tuple[int, ...]:
        return tuple(sorted(p.id for p in self.projects.values() if p.client_id == client_id))

    def room_id_for(self, project_id: int) -> int | None:
        for room in self.rooms.values():
            if room.project_id == project_id:
                return room.id
        return None


def _copy_audit(audit: AuditStamp, new_id: int | None = None) -> AuditStamp:
    return AuditStamp(
        id=audit.id if new_id is None else new_id,
        created_at=audit.created_at,
        updated_at=audit.updated_at,
    )


class FakeClientRepository(ClientRepository):
    def __init__(self, store: FakeStore):
        self._store = store

    def _read(self, client: Client) -> Client:
        return replace(
            client,
            project_ids=self._store.project_ids_for(client.id),
            audit=_copy_audit(client.audit),
        )

    async def get_by_id(self, client_id: int) -> Client | None:
        client = self._store.clients.get(client_id)
        return self._read(client) if client else None

    async def get_by_last_name(self, last_name: str) -> Client | None:
        for client_id in sorted(self._store.clients):
            client = self._store.clients[client_id]
            if client.last_name.lower() == last_name.lower():
                return self._read(client)
        return None

    async def get_all(self) -> list[Client]:
        return [self._read(c) for _, c in sorted(self._store.clients.items())]

    async def create(self, client: Client) -> Client:
        stored = replace(
            client,
            project_ids=(),
            audit=_copy_audit(client.audit, self._store.next_id("clients")),
        )
        self._store.clients[stored.id] = stored
        return self._read(stored)

    async def update(self, client: Client) -> Client:
        if client.id not in self._store.clients:
            raise ValueError(f"Client {client.id} not found")
        self._store.clients[client.id] = replace(client, project_ids=(), audit=_copy_audit(client.audit))
        return self._read(self._store.clients[client.id])

    async def delete(self, client_id: int) -> bool:
        if client_id not in self._store.clients:
            return False
        for project_id in self._store.project_ids_for(client_id):
            room_id = self._store.room_id_for(project_id)
            if room_id is not None:
                del self._store.rooms[room_id]
            del self._store.projects[project_id]
        del self._store.clients[client_id]
        return True


class FakeProjectRepository(ProjectRepository):
    def __init__(self, store: FakeStore):
        self._store = store

    def _read(self, project: Project) -> Project:
        return replace(
            project,
            room_id=self._store.room_id_for(project.id),
            audit=_copy_audit(project.audit),
        )

    async def get_by_id(self, project_id: int) -> Project | None:
        project = self._store.projects.get(project_id)
        return self._read(project) if project else None

    async def get_all(self) -> list[Project]:
        return [self._read(p) for _, p in sorted(self._store.projects.items())]

    async def get_by_status(self, status: ProjectStatus) -> list[Project]:
        return [p for p in await self.get_all() if p.status is status]

    async def get_by_client(self, client_id: int) -> list[Project]:
        return [p for p in await self.get_all() if p.client_id == client_id]

    async def get_deadlines(self) -> list[ProjectDeadline]:
        projects = sorted(
            await self.get_all(), key=lambda p: (p.due_date or date.min, p.id)
        )
        return [
            ProjectDeadline(
                due_date=p.due_date,
                start_date=p.start_date,
                name=p.name,
                status=p.status,
                client_id=p.client_id,
                room_id=p.room_id,
            )
            for p in projects
        ]

    async def create(self, project: Project) -> Project:
        stored = replace(
            project,
            room_id=None,
            audit=_copy_audit(project.audit, self._store.next_id("projects")),
        )
        self._store.projects[stored.id] = stored
        return self._read(stored)

    async def update(self, project: Project) -> Project:
        if project.id not in self._store.projects:
            raise ValueError(f"Project {project.id} not found")
        self._store.projects[project.id] = replace(project, room_id=None, audit=_copy_audit(project.audit))
        return self._read(self._store.projects[project.id])

    async def delete(self, project_id: int) -> bool:
        if project_id not in self._store.projects:
            return False
        room_id = self._store.room_id_for(project_id)
        if room_id is not None:
            del self._store.rooms[room_id]
        del self._store.projects[project_id]
        return True


class FakeRoomRepository(RoomRepository):
    def __init__(self, store: FakeStore):
        self._store = store

    def _read(self, room: Room) -> Room:
        return replace(
            room,
            checklist=list(room.checklist),
            changes=list(room.changes),
            audit=_copy_audit(room.audit),
        )

    async def get_by_id(self, room_id: int) -> Room | None:
        room = self._store.rooms.get(room_id)
        return self._read(room) if room else None

    async def get_all(self) -> list[Room]:
        return [self._read(r) for _, r in sorted(self._store.rooms.items())]

    async def get_by_type(self, room_type: RoomType) -> list[Room]:
        return [r for r in await self.get_all() if r.type is room_type]

    async def create(self, room: Room) -> Room:
        if self._store.room_id_for(room.project_id) is not None:
            raise ValueError(f"Project {room.project_id} already has a room")
        stored = replace(room, audit=_copy_audit(room.audit, self._store.next_id("rooms")))
        self._store.rooms[stored.id] = stored
        return self._read(stored)

    async def update(self, room: Room) -> Room:
        if room.id not in self._store.rooms:
            raise ValueError(f"Room {room.id} not found")
        self._store.rooms[room.id] = self._read(room)
        return self._read(room)

    async def delete(self, room_id: int) -> bool:
        return self._store.rooms.pop(room_id, None) is not None


# ── Service fixtures ─────────────────────────────────────────────────


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def client_service(store: FakeStore) -> ClientService:
    return ClientService(FakeClientRepository(store))


@pytest.fixture
def project_service(store: FakeStore, client_service: ClientService) -> ProjectService:
    return ProjectService(FakeProjectRepository(store), client_service)


@pytest.fixture
def room_service(store: FakeStore, project_service: ProjectService) -> RoomService:
    return RoomService(FakeRoomRepository(store), project_service)


# ── Sample payloads ──────────────────────────────────────────────────


@pytest.fixture
def jessica() -> ClientCreate:
    return ClientCreate(
        first_name="Jessica",
        last_name="Cook",
        email="jessicacook@gmail.com",
        phone="07314708068",
        address="33 Elm Street, London",
        notes="eco-friendly",
    )


@pytest.fixture
def alex() -> ClientCreate:
    return ClientCreate(
        first_name="Alex",
        last_name="Smith",
        email="alexsmith@gmail.com",
        phone="07829596562",
        address="12 Oak Road, Manchester",
    )


@pytest.fixture
def kitchen_remodel() -> ProjectCreate:
    return ProjectCreate(
        name="Kitchen Remodel",
        status=ProjectStatus.PLANNING,
        budget=5000,
        start_date=date(2024, 1, 1),
        due_date=date(2024, 3, 1),
    )


@pytest.fixture
def kitchen() -> RoomCreate:
    return RoomCreate(type=RoomType.KITCHEN, length=4.0, width=3.0, height=2.5, unit="m")


# ── SQLite-backed session ────────────────────────────────────────────


@pytest_asyncio.fixture
async def session_factory():
    """Fresh in-memory database per test, shared across sessions via StaticPool."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session
