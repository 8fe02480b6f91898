"""Port deciding whether a requester may run admin operations."""

from abc import ABC, abstractmethod


class Authorizer(ABC):
    """Admin authorization policy."""

    @abstractmethod
    async def authorize_admin(self, requester_email: str) -> None:
        """Return normally if allowed, raise UnauthorizedError otherwise."""
        ...
