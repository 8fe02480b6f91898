"""FastAPI dependency injection — wires infrastructure to the application layer.

Long-lived collaborators (identity store, authorizer) are built once per
process by cached providers; repositories are cheap and built per request
around the shared session factory. Tests swap any of these through
``app.dependency_overrides``.
"""

from functools import lru_cache, partial

from fastapi import Depends

from proflow.application.interfaces import (
    AuditLogRepository,
    Authorizer,
    ClientRepository,
    CreatorRepository,
    ErrorLogRepository,
    IdentityStore,
    NotificationRepository,
    TaskRepository,
    TransactionRepository,
)
from proflow.application.services import (
    AdminClaimAuthorizer,
    AuditTrail,
    DeletionPreviewService,
    DeletionWorkflow,
    DirectoryService,
    IdentityExistsAuthorizer,
    NotificationService,
    TaskService,
)
from proflow.config import get_settings
from proflow.infrastructure.database.session import async_session_factory
from proflow.infrastructure.database.repositories import (
    SQLAlchemyAuditLogRepository,
    SQLAlchemyClientRepository,
    SQLAlchemyCreatorRepository,
    SQLAlchemyErrorLogRepository,
    SQLAlchemyNotificationRepository,
    SQLAlchemyTaskRepository,
    SQLAlchemyTransactionRepository,
)
from proflow.infrastructure.firebase import FirebaseIdentityStore, initialize_firebase


# ── Record store ─────────────────────────────────────────────────────


def get_client_repository() -> ClientRepository:
    return SQLAlchemyClientRepository(async_session_factory)


def get_creator_repository() -> CreatorRepository:
    return SQLAlchemyCreatorRepository(async_session_factory)


def get_task_repository() -> TaskRepository:
    return SQLAlchemyTaskRepository(async_session_factory)


def get_transaction_repository() -> TransactionRepository:
    return SQLAlchemyTransactionRepository(async_session_factory)


def get_notification_repository() -> NotificationRepository:
    return SQLAlchemyNotificationRepository(async_session_factory)


def get_audit_log_repository() -> AuditLogRepository:
    return SQLAlchemyAuditLogRepository(async_session_factory)


def get_error_log_repository() -> ErrorLogRepository:
    return SQLAlchemyErrorLogRepository(async_session_factory)


# ── Identity & authorization ─────────────────────────────────────────


@lru_cache
def get_identity_store() -> IdentityStore:
    """Process-wide Firebase identity store; the Firebase app is created on first use."""
    return FirebaseIdentityStore(app_factory=partial(initialize_firebase, get_settings()))


def get_authorizer(
    identity_store: IdentityStore = Depends(get_identity_store),
) -> Authorizer:
    """Admin authorization policy selected by ``ADMIN_AUTHORIZATION``."""
    settings = get_settings()
    if settings.admin_authorization == "admin_claim":
        return AdminClaimAuthorizer(identity_store, claim_name=settings.admin_claim_name)
    return IdentityExistsAuthorizer(identity_store)


# ── Services ─────────────────────────────────────────────────────────


def get_audit_trail(
    audit_repository: AuditLogRepository = Depends(get_audit_log_repository),
    error_repository: ErrorLogRepository = Depends(get_error_log_repository),
) -> AuditTrail:
    return AuditTrail(audit_repository, error_repository)


def get_deletion_workflow(
    clients: ClientRepository = Depends(get_client_repository),
    creators: CreatorRepository = Depends(get_creator_repository),
    tasks: TaskRepository = Depends(get_task_repository),
    transactions: TransactionRepository = Depends(get_transaction_repository),
    notifications: NotificationRepository = Depends(get_notification_repository),
    identity_store: IdentityStore = Depends(get_identity_store),
    authorizer: Authorizer = Depends(get_authorizer),
    audit_trail: AuditTrail = Depends(get_audit_trail),
) -> DeletionWorkflow:
    """Provides the client/creator deletion workflow with every port wired up."""
    return DeletionWorkflow(
        clients=clients,
        creators=creators,
        tasks=tasks,
        transactions=transactions,
        notifications=notifications,
        identity_store=identity_store,
        authorizer=authorizer,
        audit_trail=audit_trail,
    )


def get_deletion_preview_service(
    tasks: TaskRepository = Depends(get_task_repository),
    transactions: TransactionRepository = Depends(get_transaction_repository),
    creators: CreatorRepository = Depends(get_creator_repository),
) -> DeletionPreviewService:
    return DeletionPreviewService(tasks, transactions, creators)


def get_task_service(
    tasks: TaskRepository = Depends(get_task_repository),
    transactions: TransactionRepository = Depends(get_transaction_repository),
) -> TaskService:
    return TaskService(tasks, transactions)


def get_notification_service(
    repository: NotificationRepository = Depends(get_notification_repository),
) -> NotificationService:
    return NotificationService(repository, default_limit=get_settings().notification_list_limit)


def get_directory_service(
    clients: ClientRepository = Depends(get_client_repository),
    creators: CreatorRepository = Depends(get_creator_repository),
) -> DirectoryService:
    return DirectoryService(clients, creators)
