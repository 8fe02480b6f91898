"""Pydantic DTOs for reading the audit log."""

from datetime import datetime
from typing import Any

from proflow.application.schemas.common import CamelModel


class AuditLogEntryResponse(CamelModel):
    id: str
    action: str
    actor_email: str
    entity_id: str
    entity_email: str
    deleted_data: dict[str, Any]
    ip: str
    timestamp: datetime
