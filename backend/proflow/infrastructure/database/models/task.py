"""SQLAlchemy ORM models for tasks and payment transactions."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from proflow.infrastructure.database.base import Base


class TaskModel(Base):
    """ORM model — maps to the 'tasks' table.

    ``client_id`` and ``assignee_id`` are plain indexed columns, not
    foreign keys; referential cleanup is done by the deletion workflow.
    """

    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    sl_no: Mapped[int] = mapped_column(Integer, nullable=False)
    client_id: Mapped[str] = mapped_column(String(128), nullable=False)
    client_name: Mapped[str] = mapped_column(String(255), nullable=False)
    assignee_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    assignee_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    project_name: Mapped[str] = mapped_column(String(255), nullable=False)
    pages: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    rate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    total: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    work_status: Mapped[str] = mapped_column(String(32), nullable=False)
    payment_status: Mapped[str] = mapped_column(String(32), nullable=False)
    amount_paid: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    accepted_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    submission_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    project_file_link: Mapped[str | None] = mapped_column(Text, nullable=True)
    output_file_link: Mapped[str | None] = mapped_column(Text, nullable=True)
    reassigned_from: Mapped[str | None] = mapped_column(String(128), nullable=True)
    reassigned_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    reassigned_by: Mapped[str | None] = mapped_column(String(320), nullable=True)
    unassigned_from: Mapped[str | None] = mapped_column(String(128), nullable=True)
    unassigned_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    unassigned_by: Mapped[str | None] = mapped_column(String(320), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_tasks_client", "client_id"),
        Index("ix_tasks_assignee", "assignee_id"),
        Index("ix_tasks_sl_no", "sl_no"),
    )

    def __repr__(self) -> str:
        return f"<TaskModel(id={self.id}, sl_no={self.sl_no}, project='{self.project_name}')>"


class TransactionModel(Base):
    """ORM model — maps to the 'transactions' table."""

    __tablename__ = "transactions"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    task_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    client_id: Mapped[str] = mapped_column(String(128), nullable=False)
    client_name: Mapped[str] = mapped_column(String(255), nullable=False)
    project_name: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    payment_method: Mapped[str] = mapped_column(String(32), nullable=False)
    transaction_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("ix_transactions_client", "client_id"),
        Index("ix_transactions_date", "transaction_date"),
    )
