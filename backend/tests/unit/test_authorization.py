"""Unit tests for the admin authorization policies."""

import pytest

from proflow.application.services import AdminClaimAuthorizer, IdentityExistsAuthorizer
from proflow.domain.entities import Identity
from proflow.domain.exceptions import UnauthorizedError
from tests.fakes import ADMIN, ADMIN_EMAIL, FakeIdentityStore

STAFF = Identity(uid="uid-staff", email="staff@proflow.app")


@pytest.fixture
def identity_store() -> FakeIdentityStore:
    return FakeIdentityStore([ADMIN, STAFF], fail_lookup_for={"flaky@proflow.app"})


@pytest.mark.asyncio
async def test_identity_policy_accepts_any_existing_account(identity_store):
    authorizer = IdentityExistsAuthorizer(identity_store)
    await authorizer.authorize_admin(ADMIN_EMAIL)
    await authorizer.authorize_admin(STAFF.email)


@pytest.mark.asyncio
async def test_identity_policy_rejects_unknown_email(identity_store):
    with pytest.raises(UnauthorizedError, match="Admin not found"):
        await IdentityExistsAuthorizer(identity_store).authorize_admin("stranger@example.com")


@pytest.mark.asyncio
async def test_provider_failure_is_unauthorized(identity_store):
    with pytest.raises(UnauthorizedError, match="Invalid admin"):
        await IdentityExistsAuthorizer(identity_store).authorize_admin("flaky@proflow.app")


@pytest.mark.asyncio
async def test_claim_policy_requires_admin_claim(identity_store):
    authorizer = AdminClaimAuthorizer(identity_store)

    await authorizer.authorize_admin(ADMIN_EMAIL)
    with pytest.raises(UnauthorizedError, match="Admin role required"):
        await authorizer.authorize_admin(STAFF.email)


@pytest.mark.asyncio
async def test_claim_policy_uses_configured_claim_name():
    store = FakeIdentityStore([Identity(uid="u1", email="ops@proflow.app", custom_claims={"owner": True})])

    await AdminClaimAuthorizer(store, claim_name="owner").authorize_admin("ops@proflow.app")
    with pytest.raises(UnauthorizedError):
        await AdminClaimAuthorizer(store).authorize_admin("ops@proflow.app")
