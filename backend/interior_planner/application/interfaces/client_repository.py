"""Abstract repository interface (port) for Client persistence."""

from abc import ABC, abstractmethod

from interior_planner.domain.entities import Client


class ClientRepository(ABC):
    """Port for client persistence, implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, client_id: int) -> Client | None:
        """Retrieve a single client by its identifier."""
        ...

    @abstractmethod
    async def get_by_last_name(self, last_name: str) -> Client | None:
        """Case-insensitive exact match; the lowest id wins on ties."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Client]:
        """Retrieve every client in storage order."""
        ...

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """Persist a new client and return it with the generated id."""
        ...

    @abstractmethod
    async def update(self, client: Client) -> Client:
        """Write the mutable fields of an existing client."""
        ...

    @abstractmethod
    async def delete(self, client_id: int) -> bool:
        """Delete a client with its projects and their rooms.

        Returns True if deleted, False if not found.
        """
        ...
