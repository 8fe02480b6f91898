"""Deletion workflow — tears down a client or a creator together with its dependents.

Both workflows run the same sequence of steps:

    authorize → load target → gather dependents → mutate dependents (fan-out)
    → remove identity account → delete root record → audit

The fan-out is not atomic. Every dependent mutation is awaited, the first
failure is raised, and mutations that already succeeded stay in place. The
step log (``DeletionProgress``) is written to the error log on failure so
the partial state can be reconciled.
"""

import asyncio
import logging
from collections.abc import Awaitable

from proflow.application.interfaces import (
    Authorizer,
    ClientRepository,
    CreatorRepository,
    IdentityStore,
    NotificationRepository,
    TaskRepository,
    TransactionRepository,
)
from proflow.application.services.audit_trail import AuditTrail
from proflow.domain.entities import (
    UNASSIGN,
    AuditAction,
    Client,
    ClientDeletionResult,
    Creator,
    CreatorDeletionResult,
    DeletionProgress,
    DeletionStep,
)
from proflow.domain.exceptions import (
    DeletionWorkflowError,
    EntityNotFoundError,
    InvalidRequestError,
    UnauthorizedError,
)
from proflow.infrastructure.logging.colored_logger import WorkflowLogger, WorkflowStage

logger = logging.getLogger(__name__)

clog = WorkflowLogger("ClientDeletionWorkflow", "DELETE CLIENT")
crlog = WorkflowLogger("CreatorDeletionWorkflow", "DELETE CREATOR")

# Rejections raised before any mutation; they are not error-logged.
_GATE_ERRORS = (InvalidRequestError, UnauthorizedError, EntityNotFoundError)
_GATE_STEPS = (DeletionStep.STARTED, DeletionStep.AUTHORIZED)


def _require(**values: str | None) -> list[str]:
    """Strip the given values, raising InvalidRequestError if any is blank."""
    missing = [name for name, value in values.items() if not (value and value.strip())]
    if missing:
        raise InvalidRequestError(f"Missing required field(s): {', '.join(missing)}")
    return [value.strip() for value in values.values()]  # type: ignore[union-attr]


class DeletionWorkflow:
    """Orchestrates client deletion and creator deletion/reassignment.

    Depends only on ports; the record store, identity provider and
    authorization policy are injected.
    """

    def __init__(
        self,
        *,
        clients: ClientRepository,
        creators: CreatorRepository,
        tasks: TaskRepository,
        transactions: TransactionRepository,
        notifications: NotificationRepository,
        identity_store: IdentityStore,
        authorizer: Authorizer,
        audit_trail: AuditTrail,
    ):
        self._clients = clients
        self._creators = creators
        self._tasks = tasks
        self._transactions = transactions
        self._notifications = notifications
        self._identity_store = identity_store
        self._authorizer = authorizer
        self._audit = audit_trail

    # ── Client ───────────────────────────────────────────────────────

    async def delete_client(
        self,
        client_id: str | None,
        requester_email: str | None,
        *,
        requester_ip: str | None = None,
    ) -> ClientDeletionResult:
        """Delete a client, its tasks, transactions, notifications and auth account.

        Raises:
            InvalidRequestError: ``client_id`` or ``requester_email`` missing.
            UnauthorizedError: The requester is not an admin.
            EntityNotFoundError: The client does not exist.
            DeletionWorkflowError: Any later failure; partial mutations remain.
        """
        client_id, requester_email = _require(clientId=client_id, adminEmail=requester_email)
        progress = DeletionProgress(target_id=client_id)

        try:
            with clog.timed_step(WorkflowStage.AUTHORIZE, "Verifying admin", admin=requester_email):
                await self._authorizer.authorize_admin(requester_email)
            progress.advance(DeletionStep.AUTHORIZED)

            client = await self._clients.get_by_id(client_id)
            if client is None:
                raise EntityNotFoundError("Client", client_id)
            clog.step_start(WorkflowStage.LOAD, "Starting deletion", client_id=client_id, name=client.name)

            return await self._delete_client(client, requester_email, requester_ip, progress)
        except Exception as exc:
            if isinstance(exc, _GATE_ERRORS) and progress.step in _GATE_STEPS:
                raise
            clog.step_error(WorkflowStage.ERROR, f"Stopped after step '{progress.step.value}'", error=exc)
            await self._audit.record_failure(
                action=AuditAction.CLIENT_DELETION_FAILED,
                error=exc,
                details=progress.as_details(),
            )
            raise DeletionWorkflowError(
                AuditAction.CLIENT_DELETION_FAILED.value, client_id, progress.step.value, exc
            ) from exc

    async def _delete_client(
        self,
        client: Client,
        requester_email: str,
        requester_ip: str | None,
        progress: DeletionProgress,
    ) -> ClientDeletionResult:
        with clog.timed_step(WorkflowStage.GATHER, "Loading dependents"):
            tasks, transactions, notifications = await asyncio.gather(
                self._tasks.get_by_client_id(client.id),
                self._transactions.get_by_client_id(client.id),
                self._notifications.get_by_user_id(client.id),
            )
        clog.detail(
            "Dependents found",
            tasks=len(tasks),
            transactions=len(transactions),
            notifications=len(notifications),
        )
        progress.advance(DeletionStep.DEPENDENTS_LOADED)

        operations: list[tuple[str, Awaitable]] = []
        operations += [(f"task:{t.id}", self._tasks.delete(t.id)) for t in tasks]
        operations += [(f"transaction:{t.id}", self._transactions.delete(t.id)) for t in transactions]
        operations += [(f"notification:{n.id}", self._notifications.delete(n.id)) for n in notifications]
        with clog.timed_step(WorkflowStage.MUTATE, "Deleting dependents", count=len(operations)):
            await self._fan_out(operations, progress)
        progress.advance(DeletionStep.DEPENDENTS_MUTATED)

        auth_deleted = await self._remove_identity(client.email, clog)
        progress.advance(DeletionStep.IDENTITY_HANDLED)

        with clog.timed_step(WorkflowStage.ROOT_DELETE, "Deleting client record", client_id=client.id):
            await self._clients.delete(client.id)
        progress.advance(DeletionStep.ROOT_DELETED)

        result = ClientDeletionResult(
            client_id=client.id,
            tasks_deleted=len(tasks),
            transactions_deleted=len(transactions),
            auth_account_deleted=auth_deleted,
            notifications_deleted=len(notifications),
        )
        with clog.timed_step(WorkflowStage.AUDIT, "Writing audit entry"):
            await self._audit.record(
                action=AuditAction.CLIENT_DELETED,
                actor_email=requester_email,
                entity_id=client.id,
                entity_email=client.email,
                deleted_data={
                    "clientName": client.name or "Unknown",
                    "tasksDeleted": result.tasks_deleted,
                    "transactionsDeleted": result.transactions_deleted,
                    "notificationsDeleted": result.notifications_deleted,
                    "authAccountDeleted": result.auth_account_deleted,
                },
                ip=requester_ip,
            )
        progress.advance(DeletionStep.AUDITED)
        clog.step_complete(WorkflowStage.COMPLETE, "Client deleted", client_id=client.id)
        return result

    # ── Creator ──────────────────────────────────────────────────────

    async def delete_creator(
        self,
        creator_id: str | None,
        requester_email: str | None,
        reassign_to: str | None = None,
        *,
        requester_ip: str | None = None,
    ) -> CreatorDeletionResult:
        """Delete a creator, moving its tasks to ``reassign_to`` or unassigning them.

        ``reassign_to`` of None, empty or ``"unassign"`` detaches the tasks.

        Raises:
            InvalidRequestError: Missing fields, or an unknown/self reassignment target.
            UnauthorizedError: The requester is not an admin.
            EntityNotFoundError: The creator does not exist.
            DeletionWorkflowError: Any later failure; partial mutations remain.
        """
        creator_id, requester_email = _require(creatorId=creator_id, adminEmail=requester_email)
        target_id = (reassign_to or "").strip()
        if target_id == UNASSIGN:
            target_id = ""
        progress = DeletionProgress(target_id=creator_id)

        try:
            with crlog.timed_step(WorkflowStage.AUTHORIZE, "Verifying admin", admin=requester_email):
                await self._authorizer.authorize_admin(requester_email)
            progress.advance(DeletionStep.AUTHORIZED)

            creator = await self._creators.get_by_id(creator_id)
            if creator is None:
                raise EntityNotFoundError("Creator", creator_id)

            new_assignee: Creator | None = None
            if target_id:
                if target_id == creator_id:
                    raise InvalidRequestError("Cannot reassign tasks to the creator being deleted")
                new_assignee = await self._creators.get_by_id(target_id)
                if new_assignee is None:
                    raise InvalidRequestError(f"Reassignment target '{target_id}' not found")
            crlog.step_start(
                WorkflowStage.LOAD,
                "Starting deletion",
                creator_id=creator_id,
                reassign_to=target_id or UNASSIGN,
            )

            return await self._delete_creator(creator, new_assignee, requester_email, requester_ip, progress)
        except Exception as exc:
            if isinstance(exc, _GATE_ERRORS) and progress.step in _GATE_STEPS:
                raise
            crlog.step_error(WorkflowStage.ERROR, f"Stopped after step '{progress.step.value}'", error=exc)
            await self._audit.record_failure(
                action=AuditAction.CREATOR_DELETION_FAILED,
                error=exc,
                details={**progress.as_details(), "reassignTo": target_id or None},
            )
            raise DeletionWorkflowError(
                AuditAction.CREATOR_DELETION_FAILED.value, creator_id, progress.step.value, exc
            ) from exc

    async def _delete_creator(
        self,
        creator: Creator,
        new_assignee: Creator | None,
        requester_email: str,
        requester_ip: str | None,
        progress: DeletionProgress,
    ) -> CreatorDeletionResult:
        with crlog.timed_step(WorkflowStage.GATHER, "Loading assigned tasks"):
            tasks, notifications = await asyncio.gather(
                self._tasks.get_by_assignee_id(creator.id),
                self._notifications.get_by_user_id(creator.id),
            )
        crlog.detail("Dependents found", tasks=len(tasks), notifications=len(notifications))
        progress.advance(DeletionStep.DEPENDENTS_LOADED)

        for task in tasks:
            if new_assignee is not None:
                task.reassign(new_assignee.id, new_assignee.name, previous_id=creator.id, actor=requester_email)
            else:
                task.unassign(previous_id=creator.id, actor=requester_email)

        operations: list[tuple[str, Awaitable]] = []
        operations += [(f"task:{t.id}", self._tasks.update(t)) for t in tasks]
        operations += [(f"notification:{n.id}", self._notifications.delete(n.id)) for n in notifications]
        action = "Reassigning tasks" if new_assignee else "Unassigning tasks"
        with crlog.timed_step(WorkflowStage.MUTATE, action, count=len(operations)):
            await self._fan_out(operations, progress)
        progress.advance(DeletionStep.DEPENDENTS_MUTATED)

        auth_deleted = await self._remove_identity(creator.email, crlog)
        progress.advance(DeletionStep.IDENTITY_HANDLED)

        with crlog.timed_step(WorkflowStage.ROOT_DELETE, "Deleting creator record", creator_id=creator.id):
            await self._creators.delete(creator.id)
        progress.advance(DeletionStep.ROOT_DELETED)

        reassigned_to = new_assignee.id if new_assignee else None
        result = CreatorDeletionResult(
            creator_id=creator.id,
            tasks_reassigned=len(tasks) if new_assignee else 0,
            tasks_unassigned=0 if new_assignee else len(tasks),
            auth_account_deleted=auth_deleted,
            reassigned_to=reassigned_to,
            notifications_deleted=len(notifications),
        )
        with crlog.timed_step(WorkflowStage.AUDIT, "Writing audit entry"):
            await self._audit.record(
                action=AuditAction.CREATOR_DELETED,
                actor_email=requester_email,
                entity_id=creator.id,
                entity_email=creator.email,
                deleted_data={
                    "creatorName": creator.name or "Unknown",
                    "tasksReassigned": result.tasks_reassigned,
                    "tasksUnassigned": result.tasks_unassigned,
                    "reassignedTo": reassigned_to,
                    "notificationsDeleted": result.notifications_deleted,
                    "authAccountDeleted": result.auth_account_deleted,
                },
                ip=requester_ip,
            )
        progress.advance(DeletionStep.AUDITED)
        crlog.step_complete(WorkflowStage.COMPLETE, "Creator deleted", creator_id=creator.id)
        return result

    # ── Shared steps ─────────────────────────────────────────────────

    @staticmethod
    async def _fan_out(operations: list[tuple[str, Awaitable]], progress: DeletionProgress) -> None:
        """Run all operations concurrently, record the outcome of each, raise the first failure."""
        results = await asyncio.gather(*(op for _, op in operations), return_exceptions=True)
        first_error: BaseException | None = None
        for (key, _), outcome in zip(operations, results):
            if isinstance(outcome, BaseException):
                progress.failed_ids.append(key)
                logger.error("Dependent mutation failed for %s: %r", key, outcome)
                if first_error is None:
                    first_error = outcome
            else:
                progress.mutated_ids.append(key)
        if first_error is not None:
            raise first_error

    async def _remove_identity(self, email: str | None, wlog: WorkflowLogger) -> bool:
        """Delete the auth account for ``email``. Never raises; returns True if an account was deleted."""
        if not email:
            wlog.detail("No email on record, skipping identity removal")
            return False
        try:
            identity = await self._identity_store.get_user_by_email(email)
            if identity is None:
                wlog.step_warning(WorkflowStage.IDENTITY, f"No auth account found for {email}")
                return False
            await self._identity_store.delete_user(identity.uid)
        except EntityNotFoundError:
            wlog.step_warning(WorkflowStage.IDENTITY, f"Auth account for {email} already removed")
            return False
        except Exception as exc:
            wlog.step_error(WorkflowStage.IDENTITY, f"Failed to delete auth account for {email}", error=exc)
            return False
        wlog.step_complete(WorkflowStage.IDENTITY, f"Deleted auth account {email}")
        return True
