"""HTTP tests for the admin deletion and preview endpoints, wired to in-memory fakes."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from proflow.application.services import AuditTrail, DeletionPreviewService
from proflow.domain.entities import Client, Creator, Identity, Transaction
from proflow.infrastructure.dependencies import (
    get_audit_trail,
    get_authorizer,
    get_deletion_preview_service,
    get_deletion_workflow,
)
from proflow.infrastructure.firebase import FirebaseIdentityStore
from proflow.main import create_app
from tests.fakes import ADMIN, ADMIN_EMAIL, Store, make_task

CLIENT = Client(id="client-1", name="Acme Publishing", email="billing@acme.test")


def _store(**overrides) -> Store:
    fields = {
        "clients": [CLIENT],
        "creators": [
            Creator(id="creator-1", name="Alice", email="alice@proflow.app"),
            Creator(id="creator-2", name="Bob", email="bob@proflow.app"),
        ],
        "tasks": [
            make_task("t1", sl_no=1, assignee_id="creator-1"),
            make_task("t2", sl_no=2, assignee_id="creator-1"),
        ],
        "transactions": [
            Transaction(id="tx1", client_id="client-1", client_name="Acme", project_name="Report", amount=80.0)
        ],
        "identities": [ADMIN, Identity(uid="uid-client-1", email=CLIENT.email)],
    }
    fields.update(overrides)
    return Store(**fields)


@pytest.fixture
def store() -> Store:
    return _store()


@pytest_asyncio.fixture
async def client(store: Store):
    app = create_app()
    app.dependency_overrides[get_deletion_workflow] = lambda: store.workflow
    app.dependency_overrides[get_authorizer] = lambda: store.authorizer
    app.dependency_overrides[get_audit_trail] = lambda: AuditTrail(store.audit_log, store.error_log)
    app.dependency_overrides[get_deletion_preview_service] = lambda: DeletionPreviewService(
        store.tasks, store.transactions, store.creators
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http


async def _delete(http: AsyncClient, path: str, body: dict | None = None, **kwargs):
    if body is None:
        return await http.request("DELETE", f"/api/admin/{path}", **kwargs)
    return await http.request("DELETE", f"/api/admin/{path}", json=body, **kwargs)


# ── delete-client ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_delete_client_success(client: AsyncClient, store: Store):
    response = await _delete(
        client,
        "delete-client",
        {"clientId": "client-1", "adminEmail": ADMIN_EMAIL},
        headers={"x-forwarded-for": "203.0.113.7"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Client and all associated data deleted successfully",
        "deletedData": {
            "clientId": "client-1",
            "tasksDeleted": 2,
            "transactionsDeleted": 1,
            "authAccountDeleted": True,
        },
    }
    assert not store.clients.exists("client-1")
    assert store.audit_log.entries[0].ip == "203.0.113.7"


@pytest.mark.asyncio
async def test_delete_client_missing_field_is_400(client: AsyncClient, store: Store):
    response = await _delete(client, "delete-client", {"clientId": "client-1"})

    assert response.status_code == 400
    assert "adminEmail" in response.json()["error"]
    assert store.record_calls() == []


@pytest.mark.asyncio
async def test_delete_client_without_body_is_400(client: AsyncClient):
    response = await _delete(client, "delete-client")

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request"


@pytest.mark.asyncio
async def test_delete_client_unknown_admin_is_403(client: AsyncClient, store: Store):
    response = await _delete(
        client, "delete-client", {"clientId": "client-1", "adminEmail": "stranger@example.com"}
    )

    assert response.status_code == 403
    assert response.json() == {"error": "Unauthorized: Admin not found"}
    assert store.record_calls() == []


@pytest.mark.asyncio
async def test_delete_missing_client_is_404(client: AsyncClient, store: Store):
    response = await _delete(client, "delete-client", {"clientId": "nope", "adminEmail": ADMIN_EMAIL})

    assert response.status_code == 404
    assert response.json() == {"error": "Client not found"}
    assert len(store.tasks.all()) == 2
    assert store.audit_log.entries == []


@pytest.mark.asyncio
async def test_delete_client_failure_is_500_with_details():
    failing = _store(fail_tasks={"t1"})
    app = create_app()
    app.dependency_overrides[get_deletion_workflow] = lambda: failing.workflow
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        response = await _delete(http, "delete-client", {"clientId": "client-1", "adminEmail": ADMIN_EMAIL})

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Failed to delete client"
    assert "t1" in body["details"]
    assert failing.clients.exists("client-1")
    assert len(failing.error_log.entries) == 1


@pytest.mark.asyncio
async def test_delete_client_with_unusable_firebase_credentials_is_403_json():
    def broken_credentials():
        raise FileNotFoundError("/nonexistent/sa.json")

    broken = _store(identity_store=FirebaseIdentityStore(app_factory=broken_credentials))
    app = create_app()
    app.dependency_overrides[get_deletion_workflow] = lambda: broken.workflow
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        response = await _delete(http, "delete-client", {"clientId": "client-1", "adminEmail": ADMIN_EMAIL})

    assert response.status_code == 403
    assert response.json() == {"error": "Unauthorized: Invalid admin"}
    assert broken.clients.exists("client-1")
    assert broken.record_calls() == []


@pytest.mark.asyncio
async def test_unexpected_error_is_500_json():
    def broken_workflow():
        raise RuntimeError("wiring failed")

    app = create_app()
    app.dependency_overrides[get_deletion_workflow] = broken_workflow
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        response = await _delete(http, "delete-client", {"clientId": "client-1", "adminEmail": ADMIN_EMAIL})

    assert response.status_code == 500
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"error": "Internal server error"}


# ── delete-creator ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_delete_creator_reassigns(client: AsyncClient, store: Store):
    response = await _delete(
        client,
        "delete-creator",
        {"creatorId": "creator-1", "adminEmail": ADMIN_EMAIL, "reassignTo": "creator-2"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Creator and all associated data handled successfully"
    assert body["deletedData"] == {
        "creatorId": "creator-1",
        "tasksReassigned": 2,
        "tasksUnassigned": 0,
        "authAccountDeleted": False,
        "reassignedTo": "creator-2",
    }
    assert {t.assignee_id for t in store.tasks.all()} == {"creator-2"}


@pytest.mark.asyncio
async def test_delete_creator_unassigns(client: AsyncClient, store: Store):
    response = await _delete(
        client,
        "delete-creator",
        {"creatorId": "creator-1", "adminEmail": ADMIN_EMAIL, "reassignTo": "unassign"},
    )

    assert response.status_code == 200
    data = response.json()["deletedData"]
    assert data["tasksUnassigned"] == 2
    assert data["reassignedTo"] is None
    assert {t.assignee_id for t in store.tasks.all()} == {None}


@pytest.mark.asyncio
async def test_delete_creator_unknown_target_is_400(client: AsyncClient, store: Store):
    response = await _delete(
        client,
        "delete-creator",
        {"creatorId": "creator-1", "adminEmail": ADMIN_EMAIL, "reassignTo": "creator-9"},
    )

    assert response.status_code == 400
    assert store.creators.exists("creator-1")


@pytest.mark.asyncio
async def test_delete_missing_creator_is_404(client: AsyncClient):
    response = await _delete(client, "delete-creator", {"creatorId": "creator-9", "adminEmail": ADMIN_EMAIL})

    assert response.status_code == 404
    assert response.json() == {"error": "Creator not found"}


# ── previews ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_client_deletion_info(client: AsyncClient, store: Store):
    response = await client.get("/api/admin/client-deletion-info", params={"clientId": "client-1"})

    assert response.status_code == 200
    body = response.json()
    assert body["tasksCount"] == 2
    assert body["transactionsCount"] == 1
    assert [t["id"] for t in body["taskDetails"]] == ["t2", "t1"]
    assert body["taskDetails"][0]["projectName"] == "Project t2"
    assert body["taskDetails"][0]["workStatus"] == "Pending"
    assert body["taskDetails"][0]["total"] == 250.0
    assert body["transactionDetails"][0]["amount"] == 80.0
    assert body["transactionDetails"][0]["type"] == "Other"
    assert store.clients.exists("client-1")


@pytest.mark.asyncio
async def test_creator_deletion_info(client: AsyncClient):
    response = await client.get("/api/admin/creator-deletion-info", params={"creatorId": "creator-1"})

    assert response.status_code == 200
    body = response.json()
    assert body["assignedTasksCount"] == 2
    assert body["availableCreators"] == [{"id": "creator-2", "name": "Bob", "email": "bob@proflow.app"}]
    assert body["taskDetails"][0]["clientName"] == "Acme Publishing"


@pytest.mark.asyncio
async def test_deletion_info_requires_id(client: AsyncClient):
    response = await client.get("/api/admin/client-deletion-info")
    assert response.status_code == 400
    assert response.json() == {"error": "Client ID is required"}

    response = await client.get("/api/admin/creator-deletion-info", params={"creatorId": ""})
    assert response.status_code == 400
    assert response.json() == {"error": "Creator ID is required"}


# ── audit-logs ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_audit_logs_list_completed_deletions(client: AsyncClient, store: Store):
    await _delete(
        client,
        "delete-client",
        {"clientId": "client-1", "adminEmail": ADMIN_EMAIL},
        headers={"x-forwarded-for": "203.0.113.7"},
    )
    await _delete(client, "delete-creator", {"creatorId": "creator-1", "adminEmail": ADMIN_EMAIL})

    response = await client.get("/api/admin/audit-logs", params={"adminEmail": ADMIN_EMAIL})

    assert response.status_code == 200
    entries = response.json()
    assert [e["action"] for e in entries] == ["CREATOR_DELETED", "CLIENT_DELETED"]
    assert entries[1]["entityId"] == "client-1"
    assert entries[1]["actorEmail"] == ADMIN_EMAIL
    assert entries[1]["ip"] == "203.0.113.7"
    assert entries[1]["deletedData"]["tasksDeleted"] == 2


@pytest.mark.asyncio
async def test_audit_logs_paginate(client: AsyncClient, store: Store):
    await _delete(client, "delete-client", {"clientId": "client-1", "adminEmail": ADMIN_EMAIL})
    await _delete(client, "delete-creator", {"creatorId": "creator-1", "adminEmail": ADMIN_EMAIL})

    response = await client.get(
        "/api/admin/audit-logs", params={"adminEmail": ADMIN_EMAIL, "skip": 1, "limit": 1}
    )

    assert [e["action"] for e in response.json()] == ["CLIENT_DELETED"]


@pytest.mark.asyncio
async def test_audit_logs_require_admin_email(client: AsyncClient):
    response = await client.get("/api/admin/audit-logs")

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required field(s): adminEmail"}


@pytest.mark.asyncio
async def test_audit_logs_reject_unknown_admin(client: AsyncClient):
    response = await client.get("/api/admin/audit-logs", params={"adminEmail": "stranger@example.com"})

    assert response.status_code == 403
    assert response.json() == {"error": "Unauthorized: Admin not found"}
