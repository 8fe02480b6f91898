from .audit_log import AuditLogModel, ErrorLogModel
from .client import ClientModel, CreatorModel
from .notification import NotificationModel
from .task import TaskModel, TransactionModel

__all__ = [
    "AuditLogModel",
    "ErrorLogModel",
    "ClientModel",
    "CreatorModel",
    "NotificationModel",
    "TaskModel",
    "TransactionModel",
]
