"""Unit tests for AuditTrail."""

import pytest

from proflow.application.services import AuditTrail
from proflow.domain.entities import AuditAction
from tests.fakes import FakeAuditLogRepository, FakeErrorLogRepository


@pytest.mark.asyncio
async def test_record_fills_defaults():
    audit = FakeAuditLogRepository()
    trail = AuditTrail(audit, FakeErrorLogRepository())

    entry = await trail.record(
        action=AuditAction.CLIENT_DELETED,
        actor_email="owner@proflow.app",
        entity_id="client-1",
        entity_email=None,
        deleted_data={"tasksDeleted": 0},
    )

    assert audit.entries == [entry]
    assert entry.entity_email == "N/A"
    assert entry.ip == "unknown"


@pytest.mark.asyncio
async def test_record_propagates_store_failure():
    trail = AuditTrail(FakeAuditLogRepository(fail=True), FakeErrorLogRepository())

    with pytest.raises(RuntimeError):
        await trail.record(
            action=AuditAction.CREATOR_DELETED,
            actor_email="owner@proflow.app",
            entity_id="creator-1",
            entity_email="alice@proflow.app",
            deleted_data={},
        )


@pytest.mark.asyncio
async def test_record_failure_captures_error_type_and_details():
    errors = FakeErrorLogRepository()
    trail = AuditTrail(FakeAuditLogRepository(), errors)

    entry = await trail.record_failure(
        action=AuditAction.CLIENT_DELETION_FAILED,
        error=KeyError("boom"),
        details={"lastCompletedStep": "authorized"},
    )

    assert errors.entries == [entry]
    assert entry.details["type"] == "KeyError"
    assert entry.details["lastCompletedStep"] == "authorized"


@pytest.mark.asyncio
async def test_record_failure_never_raises():
    trail = AuditTrail(FakeAuditLogRepository(), FakeErrorLogRepository(fail=True))

    result = await trail.record_failure(
        action=AuditAction.CREATOR_DELETION_FAILED,
        error=RuntimeError(""),
    )

    assert result is None


@pytest.mark.asyncio
async def test_list_entries_newest_first():
    trail = AuditTrail(FakeAuditLogRepository(), FakeErrorLogRepository())
    for entity_id in ("client-1", "client-2", "client-3"):
        await trail.record(
            action=AuditAction.CLIENT_DELETED,
            actor_email="owner@proflow.app",
            entity_id=entity_id,
            entity_email=None,
            deleted_data={},
        )

    entries = await trail.list_entries(skip=1, limit=5)

    assert [e.entity_id for e in entries] == ["client-2", "client-1"]
