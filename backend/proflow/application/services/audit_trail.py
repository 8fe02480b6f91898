"""Centralized audit trail — single entry point for audit and error log writes.

Audit entries are part of a workflow's success path and propagate their
failures. Error entries are best-effort: a failure to write one is logged
to the console and never replaces the error being recorded.
"""

import logging
from typing import Any

from proflow.application.interfaces import AuditLogRepository, ErrorLogRepository
from proflow.domain.entities import AuditAction, AuditLogEntry, ErrorLogEntry

logger = logging.getLogger(__name__)


class AuditTrail:
    """Writes append-only audit and error log entries.

    Usage:
        trail = AuditTrail(audit_repo, error_repo)
        await trail.record(
            action=AuditAction.CLIENT_DELETED,
            actor_email="owner@proflow.app",
            entity_id=client.id,
            entity_email=client.email,
            deleted_data={"tasksDeleted": 3},
            ip="203.0.113.7",
        )
    """

    def __init__(self, audit_repository: AuditLogRepository, error_repository: ErrorLogRepository):
        self._audit_repo = audit_repository
        self._error_repo = error_repository

    async def record(
        self,
        *,
        action: AuditAction,
        actor_email: str,
        entity_id: str,
        entity_email: str | None,
        deleted_data: dict[str, Any],
        ip: str | None = None,
    ) -> AuditLogEntry:
        """Append one audit entry and return it."""
        entry = AuditLogEntry(
            action=action,
            actor_email=actor_email,
            entity_id=entity_id,
            entity_email=entity_email or "N/A",
            deleted_data=deleted_data,
            ip=ip or "unknown",
        )
        saved = await self._audit_repo.append(entry)
        logger.info(
            "AUDIT [%s] entity=%s actor=%s ip=%s data=%s",
            action.value,
            entity_id,
            actor_email,
            entry.ip,
            deleted_data,
        )
        return saved

    async def record_failure(
        self,
        *,
        action: AuditAction,
        error: Exception,
        details: dict[str, Any] | None = None,
    ) -> ErrorLogEntry | None:
        """Append one error entry. Returns None if the entry could not be written."""
        entry = ErrorLogEntry(
            action=action,
            error=str(error) or type(error).__name__,
            details={
                "type": type(error).__name__,
                "repr": repr(error),
                **(details or {}),
            },
        )
        try:
            return await self._error_repo.append(entry)
        except Exception:
            logger.exception("Failed to write %s error log entry", action.value)
            return None

    async def list_entries(self, *, skip: int = 0, limit: int = 100) -> list[AuditLogEntry]:
        """Audit entries, most recent first."""
        return await self._audit_repo.get_all(skip=skip, limit=limit)
