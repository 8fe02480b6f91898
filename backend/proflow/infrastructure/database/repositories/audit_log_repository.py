"""Concrete append-only repositories for audit and error logs backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from proflow.application.interfaces import AuditLogRepository, ErrorLogRepository
from proflow.domain.entities import AuditAction, AuditLogEntry, ErrorLogEntry
from proflow.infrastructure.database.models import AuditLogModel, ErrorLogModel


class SQLAlchemyAuditLogRepository(AuditLogRepository):
    """Implements the AuditLogRepository port. Rows are inserted, never updated."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_entity(self, model: AuditLogModel) -> AuditLogEntry:
        """Map ORM model → domain entity."""
        return AuditLogEntry(
            id=model.id,
            action=AuditAction(model.action),
            actor_email=model.actor_email,
            entity_id=model.entity_id,
            entity_email=model.entity_email,
            deleted_data=model.deleted_data,
            ip=model.ip,
            timestamp=model.timestamp,
        )

    async def append(self, entry: AuditLogEntry) -> AuditLogEntry:
        async with self._session_factory() as session:
            model = AuditLogModel(
                id=entry.id,
                action=entry.action.value,
                actor_email=entry.actor_email,
                entity_id=entry.entity_id,
                entity_email=entry.entity_email,
                deleted_data=entry.deleted_data,
                ip=entry.ip,
                timestamp=entry.timestamp,
            )
            session.add(model)
            await session.commit()
            return self._to_entity(model)

    async def get_all(self, *, skip: int = 0, limit: int = 100) -> list[AuditLogEntry]:
        stmt = (
            select(AuditLogModel)
            .order_by(AuditLogModel.timestamp.desc())
            .offset(skip)
            .limit(limit)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]


class SQLAlchemyErrorLogRepository(ErrorLogRepository):
    """Implements the ErrorLogRepository port."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def append(self, entry: ErrorLogEntry) -> ErrorLogEntry:
        async with self._session_factory() as session:
            session.add(
                ErrorLogModel(
                    id=entry.id,
                    action=entry.action.value,
                    error=entry.error,
                    details=entry.details,
                    timestamp=entry.timestamp,
                )
            )
            await session.commit()
        return entry
