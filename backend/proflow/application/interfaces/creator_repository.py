"""Abstract repository interface (port) for Creator persistence."""

from abc import ABC, abstractmethod

from proflow.domain.entities import Creator


class CreatorRepository(ABC):
    """Port for creator (assignee) persistence."""

    @abstractmethod
    async def get_by_id(self, creator_id: str) -> Creator | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Creator]:
        ...

    @abstractmethod
    async def delete(self, creator_id: str) -> bool:
        """Delete a creator. Returns True if deleted, False if not found."""
        ...
