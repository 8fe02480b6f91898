"""Application service for looking up clients and creators."""

from proflow.application.interfaces import ClientRepository, CreatorRepository
from proflow.domain.entities import Client, Creator
from proflow.domain.exceptions import EntityNotFoundError


class DirectoryService:
    """Read access to client and creator records."""

    def __init__(self, clients: ClientRepository, creators: CreatorRepository):
        self._clients = clients
        self._creators = creators

    async def get_client(self, client_id: str) -> Client:
        client = await self._clients.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return client

    async def list_clients(self) -> list[Client]:
        return await self._clients.get_all()

    async def get_creator(self, creator_id: str) -> Creator:
        creator = await self._creators.get_by_id(creator_id)
        if creator is None:
            raise EntityNotFoundError("Creator", creator_id)
        return creator

    async def list_creators(self) -> list[Creator]:
        return await self._creators.get_all()
