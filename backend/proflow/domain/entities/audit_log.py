"""Append-only audit and error log entries written by the deletion workflow."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


class AuditAction(str, Enum):
    """Tags for audit and error log entries."""

    CLIENT_DELETED = "CLIENT_DELETED"
    CREATOR_DELETED = "CREATOR_DELETED"
    CLIENT_DELETION_FAILED = "CLIENT_DELETION_FAILED"
    CREATOR_DELETION_FAILED = "CREATOR_DELETION_FAILED"


@dataclass
class AuditLogEntry:
    """Record of a completed destructive admin operation.

    ``deleted_data`` holds what was removed or changed (counts, names,
    reassignment target). Entries are never updated or deleted.
    """

    action: AuditAction
    actor_email: str
    entity_id: str
    entity_email: str
    deleted_data: dict[str, Any]
    ip: str = "unknown"
    id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class ErrorLogEntry:
    """Record of a failed destructive admin operation, written best-effort."""

    action: AuditAction
    error: str
    details: dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
