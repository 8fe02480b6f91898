"""Pydantic DTOs for tasks, payments and transactions."""

from datetime import datetime

from pydantic import Field

from proflow.application.schemas.common import CamelModel
from proflow.domain.entities import PaymentMethod, PaymentStatus, WorkStatus


class TaskCreate(CamelModel):
    """Schema for creating a task. ``total`` is always computed server-side."""

    sl_no: int = Field(..., ge=0)
    client_id: str = Field(..., min_length=1)
    client_name: str = Field(..., min_length=1)
    project_name: str = Field(..., min_length=1, max_length=255)
    pages: int = Field(0, ge=0)
    rate: float = Field(0.0, ge=0)
    work_status: WorkStatus = WorkStatus.PENDING
    accepted_date: datetime | None = None
    submission_date: datetime | None = None
    notes: str | None = None
    assignee_id: str | None = None
    assignee_name: str | None = None
    project_file_link: str | None = None
    output_file_link: str | None = None


class TaskUpdate(CamelModel):
    """Partial task update — ``slNo``, ``clientId`` and ``total`` are not accepted."""

    client_name: str | None = None
    project_name: str | None = Field(None, min_length=1, max_length=255)
    pages: int | None = Field(None, ge=0)
    rate: float | None = Field(None, ge=0)
    work_status: WorkStatus | None = None
    payment_status: PaymentStatus | None = None
    accepted_date: datetime | None = None
    submission_date: datetime | None = None
    notes: str | None = None
    assignee_id: str | None = None
    assignee_name: str | None = None
    project_file_link: str | None = None
    output_file_link: str | None = None


class TaskResponse(CamelModel):
    id: str
    sl_no: int
    client_id: str
    client_name: str
    project_name: str
    pages: int
    rate: float
    total: float
    work_status: WorkStatus
    payment_status: PaymentStatus
    amount_paid: float
    accepted_date: datetime | None
    submission_date: datetime | None
    notes: str | None
    assignee_id: str | None
    assignee_name: str | None
    project_file_link: str | None
    output_file_link: str | None
    updated_at: datetime


class PaymentCreate(CamelModel):
    amount: float = Field(..., gt=0)
    payment_method: PaymentMethod = PaymentMethod.OTHER
    notes: str | None = None


class TransactionResponse(CamelModel):
    id: str
    task_id: str | None
    client_id: str
    client_name: str
    project_name: str
    amount: float
    payment_method: PaymentMethod
    transaction_date: datetime
    notes: str | None
