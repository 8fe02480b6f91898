from .audit_trail import AuditTrail
from .authorization import AdminClaimAuthorizer, IdentityExistsAuthorizer
from .deletion_preview_service import DeletionPreviewService
from .deletion_workflow import DeletionWorkflow
from .directory_service import DirectoryService
from .notification_service import NotificationService
from .task_service import TaskService

__all__ = [
    "AuditTrail",
    "AdminClaimAuthorizer",
    "IdentityExistsAuthorizer",
    "DeletionPreviewService",
    "DeletionWorkflow",
    "DirectoryService",
    "NotificationService",
    "TaskService",
]
