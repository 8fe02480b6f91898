"""Abstract repository interface (port) for Client persistence."""

from abc import ABC, abstractmethod

from proflow.domain.entities import Client


class ClientRepository(ABC):
    """Port for client persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, client_id: str) -> Client | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Client]:
        ...

    @abstractmethod
    async def delete(self, client_id: str) -> bool:
        """Delete a client. Returns True if deleted, False if not found."""
        ...
