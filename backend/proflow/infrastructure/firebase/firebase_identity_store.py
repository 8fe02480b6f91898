"""Identity store backed by Firebase Authentication via the Admin SDK."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from firebase_admin import App, auth

from proflow.application.interfaces import IdentityStore
from proflow.domain.entities import Identity
from proflow.domain.exceptions import EntityNotFoundError, IdentityProviderError

logger = logging.getLogger(__name__)


class FirebaseIdentityStore(IdentityStore):
    """Implements the IdentityStore port with ``firebase_admin.auth``.

    The Admin SDK is blocking, so each call runs in a worker thread. When
    built with ``app_factory`` the Firebase app is created on first use, so
    a bad credentials file surfaces as an ``IdentityProviderError`` from the
    call that needed it. Everything the SDK raises other than
    ``UserNotFoundError`` is reported the same way, including google-auth
    credential and transport errors.
    """

    def __init__(self, app: App | None = None, app_factory: Callable[[], App] | None = None):
        self._app = app
        self._app_factory = app_factory

    def _resolve_app(self) -> App | None:
        if self._app is None and self._app_factory is not None:
            self._app = self._app_factory()
        return self._app

    async def _call(self, fn: Callable[..., Any], arg: str) -> Any:
        return await asyncio.to_thread(lambda: fn(arg, app=self._resolve_app()))

    async def get_user_by_email(self, email: str) -> Identity | None:
        try:
            record = await self._call(auth.get_user_by_email, email)
        except auth.UserNotFoundError:
            logger.debug("No Firebase account for %s", email)
            return None
        except Exception as exc:
            raise IdentityProviderError("get_user_by_email", f"{type(exc).__name__}: {exc}") from exc
        return Identity(
            uid=record.uid,
            email=record.email or email,
            custom_claims=dict(record.custom_claims or {}),
        )

    async def delete_user(self, uid: str) -> None:
        try:
            await self._call(auth.delete_user, uid)
        except auth.UserNotFoundError as exc:
            raise EntityNotFoundError("Identity", uid) from exc
        except Exception as exc:
            raise IdentityProviderError("delete_user", f"{type(exc).__name__}: {exc}") from exc
        logger.info("Deleted Firebase account %s", uid)
