"""Application service for per-user in-app notifications."""

from proflow.application.interfaces import NotificationRepository
from proflow.application.schemas.notification import NotificationCreate
from proflow.domain.entities import Notification
from proflow.domain.exceptions import EntityNotFoundError


class NotificationService:
    """Creates notifications and serves each user's inbox."""

    def __init__(self, repository: NotificationRepository, default_limit: int = 20):
        self._repository = repository
        self._default_limit = default_limit

    async def create_notification(self, data: NotificationCreate) -> Notification:
        notification = Notification(user_id=data.user_id, message=data.message, link=data.link)
        return await self._repository.create(notification)

    async def list_for_user(
        self,
        user_id: str,
        *,
        unread_only: bool = True,
        limit: int | None = None,
    ) -> list[Notification]:
        """A user's notifications, newest first, truncated to ``limit``."""
        notifications = await self._repository.get_by_user_id(user_id)
        if unread_only:
            notifications = [n for n in notifications if not n.is_read]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[: limit or self._default_limit]

    async def mark_read(self, notification_id: str) -> Notification:
        notification = await self._repository.get_by_id(notification_id)
        if notification is None:
            raise EntityNotFoundError("Notification", notification_id)
        notification.mark_read()
        return await self._repository.update(notification)

    async def delete_notification(self, notification_id: str) -> bool:
        deleted = await self._repository.delete(notification_id)
        if not deleted:
            raise EntityNotFoundError("Notification", notification_id)
        return deleted

    async def clear_for_user(self, user_id: str) -> int:
        """Delete every notification addressed to ``user_id``; returns how many were removed."""
        notifications = await self._repository.get_by_user_id(user_id)
        removed = 0
        for notification in notifications:
            if await self._repository.delete(notification.id):
                removed += 1
        return removed
