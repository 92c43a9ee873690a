"""Application service (use case) for Client operations."""

import logging

from interior_planner.application.interfaces import ClientRepository
from interior_planner.application.schemas import ClientCreate, ClientUpdate
from interior_planner.domain.entities import Client
from interior_planner.domain.exceptions import ClientNotFoundError, InvalidArgumentError

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = {
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "phone": "phone",
    "address": "address",
}


class ClientService:
    """Orchestrates client CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ClientRepository):
        self._repository = repository

    async def get_client(self, client_id: int) -> Client:
        client = await self._repository.get_by_id(client_id)
        if client is None:
            raise ClientNotFoundError("clientId", client_id)
        return client

    async def get_client_by_last_name(self, last_name: str) -> Client:
        client = await self._repository.get_by_last_name(last_name)
        if client is None:
            raise ClientNotFoundError("lastName", last_name)
        return client

    async def list_clients(self) -> list[Client]:
        return await self._repository.get_all()

    async def create_client(self, data: ClientCreate | None) -> Client:
        if data is None:
            raise InvalidArgumentError("Client must not be null")
        for attr, label in _REQUIRED_FIELDS.items():
            value = getattr(data, attr, None)
            if value is None or not str(value).strip():
                raise InvalidArgumentError(f"Client's {label} is required")

        client = Client(
            first_name=data.first_name,
            last_name=data.last_name,
            email=str(data.email),
            phone=data.phone,
            address=data.address,
            notes=data.notes,
        )
        client.audit.stamp_created()
        created = await self._repository.create(client)
        logger.info("Created client %s (%s %s)", created.id, created.first_name, created.last_name)
        return created

    async def update_client(self, client_id: int, data: ClientUpdate) -> Client:
        client = await self.get_client(client_id)
        client.update(
            first_name=data.first_name,
            last_name=data.last_name,
            email=str(data.email) if data.email is not None else None,
            phone=data.phone,
            address=data.address,
            notes=data.notes,
        )
        client.audit.touch()
        return await self._repository.update(client)

    async def delete_client(self, client_id: int) -> bool:
        exists = await self._repository.get_by_id(client_id)
        if exists is None:
            raise ClientNotFoundError("clientId", client_id)
        deleted = await self._repository.delete(client_id)
        logger.info(
            "Deleted client %s and %d project(s)", client_id, exists.total_projects
        )
        return deleted
