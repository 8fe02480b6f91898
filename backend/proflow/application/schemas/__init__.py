from .audit import AuditLogEntryResponse
from .common import CamelModel, ErrorResponse
from .deletion import (
    ClientDeletionData,
    ClientDeletionPreviewResponse,
    ClientDeletionResponse,
    ClientTaskSummary,
    ClientTransactionSummary,
    CreatorDeletionData,
    CreatorDeletionPreviewResponse,
    CreatorDeletionResponse,
    CreatorOption,
    CreatorTaskSummary,
    DeleteClientRequest,
    DeleteCreatorRequest,
)
from .notification import ClearNotificationsResponse, NotificationCreate, NotificationResponse
from .people import ClientResponse, CreatorResponse
from .task import PaymentCreate, TaskCreate, TaskResponse, TaskUpdate, TransactionResponse

__all__ = [
    "AuditLogEntryResponse",
    "CamelModel",
    "ErrorResponse",
    "ClientDeletionData",
    "ClientDeletionPreviewResponse",
    "ClientDeletionResponse",
    "ClientTaskSummary",
    "ClientTransactionSummary",
    "CreatorDeletionData",
    "CreatorDeletionPreviewResponse",
    "CreatorDeletionResponse",
    "CreatorOption",
    "CreatorTaskSummary",
    "DeleteClientRequest",
    "DeleteCreatorRequest",
    "ClearNotificationsResponse",
    "NotificationCreate",
    "NotificationResponse",
    "ClientResponse",
    "CreatorResponse",
    "PaymentCreate",
    "TaskCreate",
    "TaskResponse",
    "TaskUpdate",
    "TransactionResponse",
]
