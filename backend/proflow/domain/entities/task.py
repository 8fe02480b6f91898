"""Domain entity for a task — one project commissioned by a client."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


class WorkStatus(str, Enum):
    """Progress of the work on a task."""

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class PaymentStatus(str, Enum):
    """How much of a task's total has been paid."""

    UNPAID = "Unpaid"
    PARTIAL = "Partial"
    PAID = "Paid"


# Fields that can never be changed through Task.update()
_IMMUTABLE_FIELDS = frozenset({"id", "sl_no", "client_id", "total", "created_at"})


@dataclass
class Task:
    """A unit of billable work.

    ``total`` is derived state: every write path goes through
    :meth:`update`, which recomputes it from ``pages`` and ``rate``.
    """

    sl_no: int
    client_id: str
    client_name: str
    project_name: str
    pages: int = 0
    rate: float = 0.0
    total: float = 0.0
    work_status: WorkStatus = WorkStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.UNPAID
    amount_paid: float = 0.0
    accepted_date: datetime | None = None
    submission_date: datetime | None = None
    notes: str | None = None
    assignee_id: str | None = None
    assignee_name: str | None = None
    project_file_link: str | None = None
    output_file_link: str | None = None
    reassigned_from: str | None = None
    reassigned_at: datetime | None = None
    reassigned_by: str | None = None
    unassigned_from: str | None = None
    unassigned_at: datetime | None = None
    unassigned_by: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        self.total = self.compute_total()

    def compute_total(self) -> float:
        return self.pages * self.rate

    def update(self, **changes: Any) -> None:
        """Apply a partial update, then recompute ``total`` and touch ``updated_at``.

        Raises:
            ValueError: If a field is unknown or may not be changed.
        """
        for name, value in changes.items():
            if name in _IMMUTABLE_FIELDS or not hasattr(self, name):
                raise ValueError(f"Task field '{name}' cannot be updated")
            setattr(self, name, value)
        self.total = self.compute_total()
        self.updated_at = datetime.now(timezone.utc)

    def reassign(self, assignee_id: str, assignee_name: str | None, *, previous_id: str, actor: str) -> None:
        """Move the task to another creator, stamping who moved it from whom."""
        now = datetime.now(timezone.utc)
        self.update(
            assignee_id=assignee_id,
            assignee_name=assignee_name,
            reassigned_from=previous_id,
            reassigned_at=now,
            reassigned_by=actor,
        )

    def unassign(self, *, previous_id: str, actor: str) -> None:
        """Detach the task from its creator without choosing a new one."""
        now = datetime.now(timezone.utc)
        self.update(
            assignee_id=None,
            assignee_name=None,
            unassigned_from=previous_id,
            unassigned_at=now,
            unassigned_by=actor,
        )

    def apply_payment(self, amount: float) -> None:
        """Add a payment and move ``payment_status`` accordingly."""
        amount_paid = (self.amount_paid or 0.0) + amount
        remaining = self.compute_total() - amount_paid
        if remaining <= 0:
            status = PaymentStatus.PAID
        elif amount_paid > 0:
            status = PaymentStatus.PARTIAL
        else:
            status = PaymentStatus.UNPAID
        self.update(amount_paid=amount_paid, payment_status=status)
