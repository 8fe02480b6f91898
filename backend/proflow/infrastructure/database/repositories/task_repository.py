"""Concrete repositories for tasks and transactions backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from proflow.application.interfaces import TaskRepository, TransactionRepository
from proflow.domain.entities import PaymentMethod, PaymentStatus, Task, Transaction, WorkStatus
from proflow.domain.exceptions import EntityNotFoundError
from proflow.infrastructure.database.models import TaskModel, TransactionModel

# Columns copied verbatim between Task and TaskModel (enums handled separately)
_TASK_COLUMNS = (
    "sl_no",
    "client_id",
    "client_name",
    "assignee_id",
    "assignee_name",
    "project_name",
    "pages",
    "rate",
    "amount_paid",
    "accepted_date",
    "submission_date",
    "notes",
    "project_file_link",
    "output_file_link",
    "reassigned_from",
    "reassigned_at",
    "reassigned_by",
    "unassigned_from",
    "unassigned_at",
    "unassigned_by",
    "updated_at",
)


def _task_to_entity(model: TaskModel) -> Task:
    """Map ORM model → domain entity. ``total`` is recomputed by the entity."""
    task = Task(
        id=model.id,
        work_status=WorkStatus(model.work_status),
        payment_status=PaymentStatus(model.payment_status),
        created_at=model.created_at,
        **{name: getattr(model, name) for name in _TASK_COLUMNS},
    )
    return task


def _write_task(model: TaskModel, task: Task) -> None:
    """Copy entity state onto the ORM model, always persisting ``pages × rate`` as the total."""
    for name in _TASK_COLUMNS:
        setattr(model, name, getattr(task, name))
    model.work_status = task.work_status.value
    model.payment_status = task.payment_status.value
    model.total = task.compute_total()


class SQLAlchemyTaskRepository(TaskRepository):
    """Implements the TaskRepository port. Each call runs in its own session."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def _select(self, *conditions) -> list[Task]:
        stmt = select(TaskModel).where(*conditions).order_by(TaskModel.sl_no.desc())
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [_task_to_entity(row) for row in result.scalars().all()]

    async def get_by_id(self, task_id: str) -> Task | None:
        async with self._session_factory() as session:
            model = await session.get(TaskModel, task_id)
            return _task_to_entity(model) if model else None

    async def get_all(self) -> list[Task]:
        return await self._select()

    async def get_by_client_id(self, client_id: str) -> list[Task]:
        return await self._select(TaskModel.client_id == client_id)

    async def get_by_assignee_id(self, assignee_id: str) -> list[Task]:
        return await self._select(TaskModel.assignee_id == assignee_id)

    async def create(self, task: Task) -> Task:
        async with self._session_factory() as session:
            model = TaskModel(id=task.id, created_at=task.created_at)
            _write_task(model, task)
            session.add(model)
            await session.commit()
            return _task_to_entity(model)

    async def update(self, task: Task) -> Task:
        async with self._session_factory() as session:
            model = await session.get(TaskModel, task.id)
            if model is None:
                raise EntityNotFoundError("Task", task.id)
            _write_task(model, task)
            await session.commit()
            return _task_to_entity(model)

    async def delete(self, task_id: str) -> bool:
        async with self._session_factory() as session:
            model = await session.get(TaskModel, task_id)
            if model is None:
                return False
            await session.delete(model)
            await session.commit()
            return True


class SQLAlchemyTransactionRepository(TransactionRepository):
    """Implements the TransactionRepository port."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_entity(self, model: TransactionModel) -> Transaction:
        """Map ORM model → domain entity."""
        return Transaction(
            id=model.id,
            task_id=model.task_id,
            client_id=model.client_id,
            client_name=model.client_name,
            project_name=model.project_name,
            amount=model.amount,
            payment_method=PaymentMethod(model.payment_method),
            transaction_date=model.transaction_date,
            notes=model.notes,
        )

    def _to_model(self, entity: Transaction) -> TransactionModel:
        """Map domain entity → ORM model (for creation)."""
        return TransactionModel(
            id=entity.id,
            task_id=entity.task_id,
            client_id=entity.client_id,
            client_name=entity.client_name,
            project_name=entity.project_name,
            amount=entity.amount,
            payment_method=entity.payment_method.value,
            transaction_date=entity.transaction_date,
            notes=entity.notes,
        )

    async def _select(self, *conditions) -> list[Transaction]:
        stmt = (
            select(TransactionModel)
            .where(*conditions)
            .order_by(TransactionModel.transaction_date.desc())
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]

    async def get_all(self) -> list[Transaction]:
        return await self._select()

    async def get_by_client_id(self, client_id: str) -> list[Transaction]:
        return await self._select(TransactionModel.client_id == client_id)

    async def record_payment(self, task: Task, transaction: Transaction) -> Transaction:
        async with self._session_factory() as session:
            async with session.begin():
                task_model = await session.get(TaskModel, task.id)
                if task_model is None:
                    raise EntityNotFoundError("Task", task.id)
                _write_task(task_model, task)
                model = self._to_model(transaction)
                session.add(model)
            return self._to_entity(model)

    async def delete(self, transaction_id: str) -> bool:
        async with self._session_factory() as session:
            model = await session.get(TransactionModel, transaction_id)
            if model is None:
                return False
            await session.delete(model)
            await session.commit()
            return True
