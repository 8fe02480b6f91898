"""Task and payment endpoints."""

from fastapi import APIRouter, Depends, Query, status

from proflow.application.schemas import (
    PaymentCreate,
    TaskCreate,
    TaskResponse,
    TaskUpdate,
    TransactionResponse,
)
from proflow.application.services import TaskService
from proflow.domain.entities import Task, Transaction
from proflow.infrastructure.dependencies import get_task_service

router = APIRouter(tags=["Tasks"])


def _task_to_response(task: Task) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        sl_no=task.sl_no,
        client_id=task.client_id,
        client_name=task.client_name,
        project_name=task.project_name,
        pages=task.pages,
        rate=task.rate,
        total=task.total,
        work_status=task.work_status,
        payment_status=task.payment_status,
        amount_paid=task.amount_paid,
        accepted_date=task.accepted_date,
        submission_date=task.submission_date,
        notes=task.notes,
        assignee_id=task.assignee_id,
        assignee_name=task.assignee_name,
        project_file_link=task.project_file_link,
        output_file_link=task.output_file_link,
        updated_at=task.updated_at,
    )


def _transaction_to_response(tx: Transaction) -> TransactionResponse:
    return TransactionResponse(
        id=tx.id,
        task_id=tx.task_id,
        client_id=tx.client_id,
        client_name=tx.client_name,
        project_name=tx.project_name,
        amount=tx.amount,
        payment_method=tx.payment_method,
        transaction_date=tx.transaction_date,
        notes=tx.notes,
    )


@router.get("/tasks", response_model=list[TaskResponse])
async def list_tasks(
    client_id: str | None = Query(None, alias="clientId"),
    assignee_id: str | None = Query(None, alias="assigneeId"),
    service: TaskService = Depends(get_task_service),
) -> list[TaskResponse]:
    """List tasks, newest serial number first, optionally scoped to a client or creator."""
    tasks = await service.list_tasks(client_id=client_id, assignee_id=assignee_id)
    return [_task_to_response(t) for t in tasks]


@router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    return _task_to_response(await service.get_task(task_id))


@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    data: TaskCreate,
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    return _task_to_response(await service.create_task(data))


@router.patch("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    data: TaskUpdate,
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """Partially update a task; the total is recomputed from pages and rate."""
    return _task_to_response(await service.update_task(task_id, data))


@router.post(
    "/tasks/{task_id}/payments",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_payment(
    task_id: str,
    data: PaymentCreate,
    service: TaskService = Depends(get_task_service),
) -> TransactionResponse:
    """Record a payment against a task and return the resulting transaction."""
    return _transaction_to_response(await service.record_payment(task_id, data))


@router.get("/transactions", response_model=list[TransactionResponse])
async def list_transactions(
    client_id: str | None = Query(None, alias="clientId"),
    service: TaskService = Depends(get_task_service),
) -> list[TransactionResponse]:
    transactions = await service.list_transactions(client_id=client_id)
    return [_transaction_to_response(tx) for tx in transactions]
