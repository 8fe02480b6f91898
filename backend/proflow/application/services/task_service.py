"""Application service (use case) for tasks and the payments recorded against them."""

import logging

from proflow.application.interfaces import TaskRepository, TransactionRepository
from proflow.application.schemas.task import PaymentCreate, TaskCreate, TaskUpdate
from proflow.domain.entities import Task, Transaction
from proflow.domain.exceptions import EntityNotFoundError, InvalidRequestError, PaymentError

logger = logging.getLogger(__name__)

# Task fields a partial update may not clear
_NON_NULLABLE = frozenset({"client_name", "project_name", "pages", "rate", "work_status", "payment_status"})


class TaskService:
    """Orchestrates task CRUD and payment recording. Depends on repository ports (DI)."""

    def __init__(self, tasks: TaskRepository, transactions: TransactionRepository):
        self._tasks = tasks
        self._transactions = transactions

    async def get_task(self, task_id: str) -> Task:
        task = await self._tasks.get_by_id(task_id)
        if task is None:
            raise EntityNotFoundError("Task", task_id)
        return task

    async def list_tasks(
        self,
        *,
        client_id: str | None = None,
        assignee_id: str | None = None,
    ) -> list[Task]:
        if client_id is not None:
            tasks = await self._tasks.get_by_client_id(client_id)
            if assignee_id is not None:
                tasks = [t for t in tasks if t.assignee_id == assignee_id]
        elif assignee_id is not None:
            tasks = await self._tasks.get_by_assignee_id(assignee_id)
        else:
            return await self._tasks.get_all()
        return sorted(tasks, key=lambda t: t.sl_no, reverse=True)

    async def create_task(self, data: TaskCreate) -> Task:
        task = Task(**data.model_dump())
        return await self._tasks.create(task)

    async def update_task(self, task_id: str, data: TaskUpdate) -> Task:
        """Apply a partial update. ``total`` is recomputed from the resulting pages and rate."""
        task = await self.get_task(task_id)
        changes = data.model_dump(exclude_unset=True)
        cleared = sorted(name for name in _NON_NULLABLE if name in changes and changes[name] is None)
        if cleared:
            raise InvalidRequestError(f"Field(s) cannot be null: {', '.join(cleared)}")
        try:
            task.update(**changes)
        except ValueError as exc:
            raise InvalidRequestError(str(exc)) from exc
        return await self._tasks.update(task)

    async def record_payment(self, task_id: str, data: PaymentCreate) -> Transaction:
        """Record a payment, moving the task's payment status and appending a transaction."""
        if data.amount <= 0:
            raise PaymentError("Payment amount must be positive")
        task = await self.get_task(task_id)
        task.apply_payment(data.amount)
        transaction = Transaction(
            task_id=task.id,
            client_id=task.client_id,
            client_name=task.client_name,
            project_name=task.project_name,
            amount=data.amount,
            payment_method=data.payment_method,
            notes=data.notes,
        )
        saved = await self._transactions.record_payment(task, transaction)
        logger.info(
            "Payment of %.2f recorded for task %s (status=%s, paid=%.2f/%.2f)",
            data.amount,
            task.id,
            task.payment_status.value,
            task.amount_paid,
            task.total,
        )
        return saved

    async def list_transactions(self, *, client_id: str | None = None) -> list[Transaction]:
        if client_id is not None:
            return await self._transactions.get_by_client_id(client_id)
        return await self._transactions.get_all()
