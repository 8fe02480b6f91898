"""Admin authorization policies backed by the identity provider."""

import logging

from proflow.application.interfaces import Authorizer, IdentityStore
from proflow.domain.entities import Identity
from proflow.domain.exceptions import IdentityProviderError, UnauthorizedError

logger = logging.getLogger(__name__)


class IdentityExistsAuthorizer(Authorizer):
    """Treats any email with an identity-provider account as an admin.

    This only proves the account exists; it does not check a role.
    Use ``AdminClaimAuthorizer`` when accounts carry an admin claim.
    """

    def __init__(self, identity_store: IdentityStore):
        self._identity_store = identity_store

    async def _resolve(self, requester_email: str) -> Identity:
        try:
            identity = await self._identity_store.get_user_by_email(requester_email)
        except IdentityProviderError as exc:
            logger.warning("Admin lookup failed for %s: %s", requester_email, exc)
            raise UnauthorizedError("Unauthorized: Invalid admin") from exc
        if identity is None:
            raise UnauthorizedError("Unauthorized: Admin not found")
        return identity

    async def authorize_admin(self, requester_email: str) -> None:
        await self._resolve(requester_email)


class AdminClaimAuthorizer(IdentityExistsAuthorizer):
    """Requires the requester's account to carry a truthy admin custom claim."""

    def __init__(self, identity_store: IdentityStore, claim_name: str = "admin"):
        super().__init__(identity_store)
        self._claim_name = claim_name

    async def authorize_admin(self, requester_email: str) -> None:
        identity = await self._resolve(requester_email)
        if not identity.custom_claims.get(self._claim_name):
            raise UnauthorizedError("Unauthorized: Admin role required")
