"""Concrete repositories for clients and creators backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from proflow.application.interfaces import ClientRepository, CreatorRepository
from proflow.domain.entities import Client, Creator
from proflow.infrastructure.database.models import ClientModel, CreatorModel


class SQLAlchemyClientRepository(ClientRepository):
    """Implements the ClientRepository port. Each call runs in its own session."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_entity(self, model: ClientModel) -> Client:
        """Map ORM model → domain entity."""
        return Client(
            id=model.id,
            name=model.name,
            email=model.email,
            avatar=model.avatar,
            data_ai_hint=model.data_ai_hint,
            created_at=model.created_at,
        )

    async def get_by_id(self, client_id: str) -> Client | None:
        async with self._session_factory() as session:
            model = await session.get(ClientModel, client_id)
            return self._to_entity(model) if model else None

    async def get_all(self) -> list[Client]:
        async with self._session_factory() as session:
            result = await session.execute(select(ClientModel).order_by(ClientModel.name))
            return [self._to_entity(row) for row in result.scalars().all()]

    async def delete(self, client_id: str) -> bool:
        async with self._session_factory() as session:
            model = await session.get(ClientModel, client_id)
            if model is None:
                return False
            await session.delete(model)
            await session.commit()
            return True


class SQLAlchemyCreatorRepository(CreatorRepository):
    """Implements the CreatorRepository port over the 'assignees' table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_entity(self, model: CreatorModel) -> Creator:
        """Map ORM model → domain entity."""
        return Creator(
            id=model.id,
            name=model.name,
            email=model.email,
            description=model.description,
            avatar=model.avatar,
            mobile=model.mobile,
            created_at=model.created_at,
        )

    async def get_by_id(self, creator_id: str) -> Creator | None:
        async with self._session_factory() as session:
            model = await session.get(CreatorModel, creator_id)
            return self._to_entity(model) if model else None

    async def get_all(self) -> list[Creator]:
        async with self._session_factory() as session:
            result = await session.execute(select(CreatorModel).order_by(CreatorModel.name))
            return [self._to_entity(row) for row in result.scalars().all()]

    async def delete(self, creator_id: str) -> bool:
        async with self._session_factory() as session:
            model = await session.get(CreatorModel, creator_id)
            if model is None:
                return False
            await session.delete(model)
            await session.commit()
            return True
