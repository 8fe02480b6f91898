from .audit_log_repository import SQLAlchemyAuditLogRepository, SQLAlchemyErrorLogRepository
from .client_repository import SQLAlchemyClientRepository, SQLAlchemyCreatorRepository
from .notification_repository import SQLAlchemyNotificationRepository
from .task_repository import SQLAlchemyTaskRepository, SQLAlchemyTransactionRepository

__all__ = [
    "SQLAlchemyAuditLogRepository",
    "SQLAlchemyErrorLogRepository",
    "SQLAlchemyClientRepository",
    "SQLAlchemyCreatorRepository",
    "SQLAlchemyNotificationRepository",
    "SQLAlchemyTaskRepository",
    "SQLAlchemyTransactionRepository",
]
