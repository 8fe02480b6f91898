"""Admin endpoints: client and creator deletion, their impact previews, and the audit log."""

import logging

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from proflow.application.interfaces import Authorizer
from proflow.application.schemas import (
    AuditLogEntryResponse,
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
    ErrorResponse,
)
from proflow.application.services import AuditTrail, DeletionPreviewService, DeletionWorkflow
from proflow.config import get_settings
from proflow.domain.exceptions import (
    DeletionWorkflowError,
    EntityNotFoundError,
    InvalidRequestError,
    UnauthorizedError,
)
from proflow.infrastructure.dependencies import (
    get_audit_trail,
    get_authorizer,
    get_deletion_preview_service,
    get_deletion_workflow,
)
from proflow.presentation.api.errors import error_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def _requester_ip(request: Request) -> str:
    return request.headers.get(get_settings().forwarded_for_header) or "unknown"


def _gate_error(exc: Exception, entity: str) -> JSONResponse:
    """Map a pre-mutation rejection to its status code."""
    if isinstance(exc, InvalidRequestError):
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))
    if isinstance(exc, UnauthorizedError):
        return error_response(status.HTTP_403_FORBIDDEN, str(exc))
    return error_response(status.HTTP_404_NOT_FOUND, f"{entity} not found")


# ── Deletion ─────────────────────────────────────────────────────────


@router.delete("/delete-client", response_model=ClientDeletionResponse, responses=_ERRORS)
async def delete_client(
    body: DeleteClientRequest,
    request: Request,
    workflow: DeletionWorkflow = Depends(get_deletion_workflow),
):
    """Delete a client together with its tasks, transactions and auth account."""
    try:
        result = await workflow.delete_client(
            body.client_id, body.admin_email, requester_ip=_requester_ip(request)
        )
    except (InvalidRequestError, UnauthorizedError, EntityNotFoundError) as exc:
        return _gate_error(exc, "Client")
    except DeletionWorkflowError as exc:
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to delete client", str(exc)
        )

    return ClientDeletionResponse(
        message="Client and all associated data deleted successfully",
        deleted_data=ClientDeletionData(
            client_id=result.client_id,
            tasks_deleted=result.tasks_deleted,
            transactions_deleted=result.transactions_deleted,
            auth_account_deleted=result.auth_account_deleted,
        ),
    )


@router.delete("/delete-creator", response_model=CreatorDeletionResponse, responses=_ERRORS)
async def delete_creator(
    body: DeleteCreatorRequest,
    request: Request,
    workflow: DeletionWorkflow = Depends(get_deletion_workflow),
):
    """Delete a creator, reassigning its tasks to ``reassignTo`` or unassigning them."""
    try:
        result = await workflow.delete_creator(
            body.creator_id,
            body.admin_email,
            body.reassign_to,
            requester_ip=_requester_ip(request),
        )
    except (InvalidRequestError, UnauthorizedError, EntityNotFoundError) as exc:
        return _gate_error(exc, "Creator")
    except DeletionWorkflowError as exc:
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to delete creator", str(exc)
        )

    return CreatorDeletionResponse(
        message="Creator and all associated data handled successfully",
        deleted_data=CreatorDeletionData(
            creator_id=result.creator_id,
            tasks_reassigned=result.tasks_reassigned,
            tasks_unassigned=result.tasks_unassigned,
            auth_account_deleted=result.auth_account_deleted,
            reassigned_to=result.reassigned_to,
        ),
    )


# ── Previews ─────────────────────────────────────────────────────────


@router.get("/client-deletion-info", response_model=ClientDeletionPreviewResponse, responses=_ERRORS)
async def client_deletion_info(
    client_id: str | None = Query(None, alias="clientId"),
    service: DeletionPreviewService = Depends(get_deletion_preview_service),
):
    """Counts and summaries of everything a client deletion would remove."""
    try:
        preview = await service.preview_client_deletion(client_id)
    except InvalidRequestError as exc:
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))
    except Exception as exc:
        logger.exception("Client deletion preview failed for %s", client_id)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to get client deletion info", str(exc)
        )

    return ClientDeletionPreviewResponse(
        tasks_count=len(preview.tasks),
        transactions_count=len(preview.transactions),
        task_details=[
            ClientTaskSummary(
                id=t.id,
                project_name=t.project_name,
                work_status=t.work_status.value,
                total=t.total,
            )
            for t in preview.tasks
        ],
        transaction_details=[
            ClientTransactionSummary(
                id=tx.id,
                amount=tx.amount,
                date=tx.transaction_date,
                type=tx.payment_method.value,
            )
            for tx in preview.transactions
        ],
    )


@router.get("/creator-deletion-info", response_model=CreatorDeletionPreviewResponse, responses=_ERRORS)
async def creator_deletion_info(
    creator_id: str | None = Query(None, alias="creatorId"),
    service: DeletionPreviewService = Depends(get_deletion_preview_service),
):
    """Assigned-task count and the creators those tasks could be moved to."""
    try:
        preview = await service.preview_creator_deletion(creator_id)
    except InvalidRequestError as exc:
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))
    except Exception as exc:
        logger.exception("Creator deletion preview failed for %s", creator_id)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to get creator deletion info", str(exc)
        )

    return CreatorDeletionPreviewResponse(
        assigned_tasks_count=len(preview.tasks),
        available_creators=[
            CreatorOption(id=c.id, name=c.name, email=c.email) for c in preview.available_creators
        ],
        task_details=[
            CreatorTaskSummary(
                id=t.id,
                project_name=t.project_name,
                client_name=t.client_name,
                work_status=t.work_status.value,
                submission_date=t.submission_date,
            )
            for t in preview.tasks
        ],
    )


# ── Audit log ────────────────────────────────────────────────────────


@router.get("/audit-logs", response_model=list[AuditLogEntryResponse], responses=_ERRORS)
async def list_audit_logs(
    admin_email: str | None = Query(None, alias="adminEmail"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    authorizer: Authorizer = Depends(get_authorizer),
    audit_trail: AuditTrail = Depends(get_audit_trail),
):
    """Completed client and creator deletions, newest first. Admin only."""
    if not admin_email or not admin_email.strip():
        return error_response(status.HTTP_400_BAD_REQUEST, "Missing required field(s): adminEmail")
    try:
        await authorizer.authorize_admin(admin_email)
    except UnauthorizedError as exc:
        return error_response(status.HTTP_403_FORBIDDEN, str(exc))

    entries = await audit_trail.list_entries(skip=skip, limit=limit)
    return [
        AuditLogEntryResponse(
            id=e.id,
            action=e.action.value,
            actor_email=e.actor_email,
            entity_id=e.entity_id,
            entity_email=e.entity_email,
            deleted_data=e.deleted_data,
            ip=e.ip,
            timestamp=e.timestamp,
        )
        for e in entries
    ]
