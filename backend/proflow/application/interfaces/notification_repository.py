"""Abstract repository interface (port) for Notification persistence."""

from abc import ABC, abstractmethod

from proflow.domain.entities import Notification


class NotificationRepository(ABC):
    """Port for notification persistence."""

    @abstractmethod
    async def get_by_id(self, notification_id: str) -> Notification | None:
        ...

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> list[Notification]:
        """All notifications addressed to ``user_id``, in no particular order."""
        ...

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        ...

    @abstractmethod
    async def update(self, notification: Notification) -> Notification:
        ...

    @abstractmethod
    async def delete(self, notification_id: str) -> bool:
        ...
