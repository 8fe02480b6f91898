"""Unit tests for the TaskService."""

import pytest

from proflow.application.schemas import PaymentCreate, TaskCreate, TaskUpdate
from proflow.application.services import TaskService
from proflow.domain.entities import PaymentMethod, PaymentStatus
from proflow.domain.exceptions import EntityNotFoundError, InvalidRequestError
from tests.fakes import FakeTaskRepository, FakeTransactionRepository, make_task


@pytest.fixture
def tasks() -> FakeTaskRepository:
    return FakeTaskRepository(
        [
            make_task("t1", sl_no=1, pages=10, rate=10.0, assignee_id="creator-1"),
            make_task("t2", sl_no=2, client_id="client-2"),
            make_task("t3", sl_no=3, assignee_id="creator-1"),
        ]
    )


@pytest.fixture
def transactions(tasks) -> FakeTransactionRepository:
    return FakeTransactionRepository(tasks=tasks)


@pytest.fixture
def service(tasks, transactions) -> TaskService:
    return TaskService(tasks, transactions)


@pytest.mark.asyncio
async def test_create_task_computes_total(service: TaskService, tasks: FakeTaskRepository):
    data = TaskCreate(
        sl_no=4,
        client_id="client-1",
        client_name="Acme Publishing",
        project_name="Catalogue",
        pages=30,
        rate=4.5,
    )

    task = await service.create_task(data)

    assert task.total == 135.0
    assert task.payment_status == PaymentStatus.UNPAID
    assert tasks.stored(task.id).total == 135.0


@pytest.mark.asyncio
async def test_get_task_not_found(service: TaskService):
    with pytest.raises(EntityNotFoundError):
        await service.get_task("missing")


@pytest.mark.asyncio
async def test_list_tasks_filters_and_orders(service: TaskService):
    assert [t.id for t in await service.list_tasks()] == ["t3", "t2", "t1"]
    assert [t.id for t in await service.list_tasks(client_id="client-1")] == ["t3", "t1"]
    assert [t.id for t in await service.list_tasks(assignee_id="creator-1")] == ["t3", "t1"]
    assert await service.list_tasks(client_id="client-2", assignee_id="creator-1") == []


@pytest.mark.asyncio
async def test_update_task_recomputes_persisted_total(service: TaskService, tasks: FakeTaskRepository):
    updated = await service.update_task("t1", TaskUpdate(pages=7))

    assert updated.total == 70.0
    assert tasks.stored("t1").total == 70.0

    await service.update_task("t1", TaskUpdate(rate=2.0, notes="rush job"))
    stored = tasks.stored("t1")
    assert stored.total == stored.pages * stored.rate == 14.0
    assert stored.notes == "rush job"


@pytest.mark.asyncio
async def test_update_task_rejects_null_for_required_fields(service: TaskService):
    with pytest.raises(InvalidRequestError, match="pages"):
        await service.update_task("t1", TaskUpdate(pages=None))


@pytest.mark.asyncio
async def test_update_task_can_clear_optional_fields(service: TaskService, tasks: FakeTaskRepository):
    await service.update_task("t1", TaskUpdate(assignee_id=None))
    assert tasks.stored("t1").assignee_id is None


@pytest.mark.asyncio
async def test_payments_move_status_and_record_transactions(
    service: TaskService,
    tasks: FakeTaskRepository,
    transactions: FakeTransactionRepository,
):
    first = await service.record_payment("t1", PaymentCreate(amount=30.0, payment_method=PaymentMethod.UPI))
    assert tasks.stored("t1").payment_status == PaymentStatus.PARTIAL
    assert first.client_id == "client-1"
    assert first.task_id == "t1"
    assert first.payment_method == PaymentMethod.UPI

    await service.record_payment("t1", PaymentCreate(amount=70.0))
    stored = tasks.stored("t1")
    assert stored.payment_status == PaymentStatus.PAID
    assert stored.amount_paid == 100.0

    assert len(transactions.all()) == 2
    assert [tx.amount for tx in await service.list_transactions(client_id="client-1")] in ([70.0, 30.0], [30.0, 70.0])


@pytest.mark.asyncio
async def test_payment_for_missing_task(service: TaskService, transactions: FakeTransactionRepository):
    with pytest.raises(EntityNotFoundError):
        await service.record_payment("missing", PaymentCreate(amount=10.0))
    assert transactions.all() == []
