"""SQLAlchemy ORM models for the append-only audit and error logs."""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from proflow.infrastructure.database.base import Base


class AuditLogModel(Base):
    """ORM model — maps to the 'audit_logs' table."""

    __tablename__ = "audit_logs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    action: Mapped[str] = mapped_column(String(64), nullable=False)
    actor_email: Mapped[str] = mapped_column(String(320), nullable=False)
    entity_id: Mapped[str] = mapped_column(String(128), nullable=False)
    entity_email: Mapped[str] = mapped_column(String(320), nullable=False)
    deleted_data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    ip: Mapped[str] = mapped_column(String(255), nullable=False, default="unknown")
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_audit_logs_entity", "entity_id"),
        Index("ix_audit_logs_timestamp", "timestamp"),
    )


class ErrorLogModel(Base):
    """ORM model — maps to the 'error_logs' table."""

    __tablename__ = "error_logs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    action: Mapped[str] = mapped_column(String(64), nullable=False)
    error: Mapped[str] = mapped_column(Text, nullable=False)
    details: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
