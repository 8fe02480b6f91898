"""Concrete repository for notifications backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from proflow.application.interfaces import NotificationRepository
from proflow.domain.entities import Notification
from proflow.domain.exceptions import EntityNotFoundError
from proflow.infrastructure.database.models import NotificationModel


class SQLAlchemyNotificationRepository(NotificationRepository):
    """Implements the NotificationRepository port. Each call runs in its own session."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_entity(self, model: NotificationModel) -> Notification:
        """Map ORM model → domain entity."""
        return Notification(
            id=model.id,
            user_id=model.user_id,
            message=model.message,
            link=model.link,
            is_read=model.is_read,
            created_at=model.created_at,
        )

    async def get_by_id(self, notification_id: str) -> Notification | None:
        async with self._session_factory() as session:
            model = await session.get(NotificationModel, notification_id)
            return self._to_entity(model) if model else None

    async def get_by_user_id(self, user_id: str) -> list[Notification]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(NotificationModel).where(NotificationModel.user_id == user_id)
            )
            return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, notification: Notification) -> Notification:
        async with self._session_factory() as session:
            model = NotificationModel(
                id=notification.id,
                user_id=notification.user_id,
                message=notification.message,
                link=notification.link,
                is_read=notification.is_read,
                created_at=notification.created_at,
            )
            session.add(model)
            await session.commit()
            return self._to_entity(model)

    async def update(self, notification: Notification) -> Notification:
        async with self._session_factory() as session:
            model = await session.get(NotificationModel, notification.id)
            if model is None:
                raise EntityNotFoundError("Notification", notification.id)
            model.message = notification.message
            model.link = notification.link
            model.is_read = notification.is_read
            await session.commit()
            return self._to_entity(model)

    async def delete(self, notification_id: str) -> bool:
        async with self._session_factory() as session:
            model = await session.get(NotificationModel, notification_id)
            if model is None:
                return False
            await session.delete(model)
            await session.commit()
            return True
