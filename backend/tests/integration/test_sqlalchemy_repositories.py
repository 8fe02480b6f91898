"""SQLAlchemy repositories against a throwaway SQLite database."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from proflow.domain.entities import (
    AuditAction,
    AuditLogEntry,
    ErrorLogEntry,
    Notification,
    PaymentStatus,
    Transaction,
)
from proflow.domain.exceptions import EntityNotFoundError
from proflow.infrastructure.database import Base
from proflow.infrastructure.database.models import ClientModel, CreatorModel
from proflow.infrastructure.database.repositories import (
    SQLAlchemyAuditLogRepository,
    SQLAlchemyClientRepository,
    SQLAlchemyCreatorRepository,
    SQLAlchemyErrorLogRepository,
    SQLAlchemyNotificationRepository,
    SQLAlchemyTaskRepository,
    SQLAlchemyTransactionRepository,
)
from tests.fakes import make_task


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'proflow.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.mark.asyncio
async def test_client_and_creator_roundtrip(session_factory):
    clients = SQLAlchemyClientRepository(session_factory)
    creators = SQLAlchemyCreatorRepository(session_factory)

    async with session_factory() as session:
        session.add(ClientModel(id="client-1", name="Acme Publishing", email="billing@acme.test"))
        session.add(CreatorModel(id="creator-1", name="Alice", email="alice@proflow.app", mobile="555-0100"))
        await session.commit()

    client = await clients.get_by_id("client-1")
    assert client.name == "Acme Publishing"
    assert (await creators.get_by_id("creator-1")).mobile == "555-0100"

    assert await clients.delete("client-1") is True
    assert await clients.delete("client-1") is False
    assert await clients.get_by_id("client-1") is None
    assert [c.id for c in await creators.get_all()] == ["creator-1"]


@pytest.mark.asyncio
async def test_task_queries_order_by_serial_number(session_factory):
    tasks = SQLAlchemyTaskRepository(session_factory)
    await tasks.create(make_task("t1", sl_no=1, assignee_id="creator-1"))
    await tasks.create(make_task("t2", sl_no=5))
    await tasks.create(make_task("t3", sl_no=3, client_id="client-2", assignee_id="creator-1"))

    assert [t.id for t in await tasks.get_all()] == ["t2", "t3", "t1"]
    assert [t.id for t in await tasks.get_by_client_id("client-1")] == ["t2", "t1"]
    assert [t.id for t in await tasks.get_by_assignee_id("creator-1")] == ["t3", "t1"]


@pytest.mark.asyncio
async def test_task_update_persists_recomputed_total(session_factory):
    tasks = SQLAlchemyTaskRepository(session_factory)
    await tasks.create(make_task("t1", pages=10, rate=25.0, assignee_id="creator-1"))

    task = await tasks.get_by_id("t1")
    task.reassign("creator-2", "Bob", previous_id="creator-1", actor="owner@proflow.app")
    task.update(pages=3)
    await tasks.update(task)

    stored = await tasks.get_by_id("t1")
    assert stored.total == 75.0
    assert stored.assignee_id == "creator-2"
    assert stored.reassigned_from == "creator-1"


@pytest.mark.asyncio
async def test_task_update_missing_raises(session_factory):
    tasks = SQLAlchemyTaskRepository(session_factory)
    with pytest.raises(EntityNotFoundError):
        await tasks.update(make_task("ghost"))
    assert await tasks.delete("ghost") is False


@pytest.mark.asyncio
async def test_record_payment_writes_task_and_transaction(session_factory):
    tasks = SQLAlchemyTaskRepository(session_factory)
    transactions = SQLAlchemyTransactionRepository(session_factory)
    await tasks.create(make_task("t1", pages=4, rate=25.0))

    task = await tasks.get_by_id("t1")
    task.apply_payment(40.0)
    await transactions.record_payment(
        task,
        Transaction(
            id="tx1",
            task_id="t1",
            client_id=task.client_id,
            client_name=task.client_name,
            project_name=task.project_name,
            amount=40.0,
        ),
    )

    stored = await tasks.get_by_id("t1")
    assert stored.payment_status == PaymentStatus.PARTIAL
    assert stored.amount_paid == 40.0
    assert [tx.id for tx in await transactions.get_by_client_id("client-1")] == ["tx1"]

    assert await transactions.delete("tx1") is True
    assert await transactions.get_all() == []


@pytest.mark.asyncio
async def test_notifications_by_user(session_factory):
    notifications = SQLAlchemyNotificationRepository(session_factory)
    await notifications.create(Notification(id="n1", user_id="admin", message="New task"))
    await notifications.create(Notification(id="n2", user_id="creator-1", message="Assigned"))

    note = await notifications.get_by_id("n1")
    note.mark_read()
    await notifications.update(note)

    admin_inbox = await notifications.get_by_user_id("admin")
    assert [(n.id, n.is_read) for n in admin_inbox] == [("n1", True)]
    assert await notifications.delete("n2") is True


@pytest.mark.asyncio
async def test_audit_and_error_logs_append(session_factory):
    audit = SQLAlchemyAuditLogRepository(session_factory)
    errors = SQLAlchemyErrorLogRepository(session_factory)

    await audit.append(
        AuditLogEntry(
            action=AuditAction.CLIENT_DELETED,
            actor_email="owner@proflow.app",
            entity_id="client-1",
            entity_email="billing@acme.test",
            deleted_data={"tasksDeleted": 2, "authAccountDeleted": False},
            ip="203.0.113.7",
        )
    )
    saved_error = await errors.append(
        ErrorLogEntry(
            action=AuditAction.CLIENT_DELETION_FAILED,
            error="boom",
            details={"lastCompletedStep": "dependents_loaded", "failedIds": ["task:t1"]},
        )
    )

    [entry] = await audit.get_all()
    assert entry.deleted_data == {"tasksDeleted": 2, "authAccountDeleted": False}
    assert entry.ip == "203.0.113.7"
    assert saved_error.details["failedIds"] == ["task:t1"]
