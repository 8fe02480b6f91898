"""Domain entity for a payment transaction against a task."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class PaymentMethod(str, Enum):
    CASH = "Cash"
    BANK_TRANSFER = "Bank Transfer"
    UPI = "UPI"
    OTHER = "Other"


@dataclass
class Transaction:
    """A single payment received from a client for one of its tasks."""

    client_id: str
    client_name: str
    project_name: str
    amount: float
    payment_method: PaymentMethod = PaymentMethod.OTHER
    task_id: str | None = None
    notes: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    transaction_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
