from .audit_log_repository import AuditLogRepository, ErrorLogRepository
from .authorizer import Authorizer
from .client_repository import ClientRepository
from .creator_repository import CreatorRepository
from .identity_store import IdentityStore
from .notification_repository import NotificationRepository
from .task_repository import TaskRepository
from .transaction_repository import TransactionRepository

__all__ = [
    "AuditLogRepository",
    "ErrorLogRepository",
    "Authorizer",
    "ClientRepository",
    "CreatorRepository",
    "IdentityStore",
    "NotificationRepository",
    "TaskRepository",
    "TransactionRepository",
]
