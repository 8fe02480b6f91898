from .audit_log import AuditAction, AuditLogEntry, ErrorLogEntry
from .client import Client
from .creator import Creator
from .deletion import (
    UNASSIGN,
    ClientDeletionPreview,
    ClientDeletionResult,
    CreatorDeletionPreview,
    CreatorDeletionResult,
    DeletionProgress,
    DeletionStep,
)
from .identity import Identity
from .notification import ADMIN_RECIPIENT, Notification
from .task import PaymentStatus, Task, WorkStatus
from .transaction import PaymentMethod, Transaction

__all__ = [
    "AuditAction",
    "AuditLogEntry",
    "ErrorLogEntry",
    "Client",
    "Creator",
    "UNASSIGN",
    "ClientDeletionPreview",
    "ClientDeletionResult",
    "CreatorDeletionPreview",
    "CreatorDeletionResult",
    "DeletionProgress",
    "DeletionStep",
    "Identity",
    "ADMIN_RECIPIENT",
    "Notification",
    "PaymentStatus",
    "Task",
    "WorkStatus",
    "PaymentMethod",
    "Transaction",
]
