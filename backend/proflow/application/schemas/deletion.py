"""Pydantic DTOs for the admin deletion and deletion-preview endpoints."""

from datetime import datetime

from pydantic import Field

from proflow.application.schemas.common import CamelModel


class DeleteClientRequest(CamelModel):
    """Body of ``DELETE /api/admin/delete-client``.

    Fields are optional here so that a missing value is reported as a
    400 by the workflow rather than rejected by the framework.
    """

    client_id: str | None = Field(None, examples=["c_8f2b"])
    admin_email: str | None = Field(None, examples=["owner@proflow.app"])


class DeleteCreatorRequest(CamelModel):
    """Body of ``DELETE /api/admin/delete-creator``."""

    creator_id: str | None = None
    admin_email: str | None = None
    reassign_to: str | None = Field(
        None,
        description='Creator id to move tasks to, or "unassign" / omitted to detach them.',
    )


class ClientDeletionData(CamelModel):
    client_id: str
    tasks_deleted: int
    transactions_deleted: int
    auth_account_deleted: bool


class ClientDeletionResponse(CamelModel):
    success: bool = True
    message: str
    deleted_data: ClientDeletionData


class CreatorDeletionData(CamelModel):
    creator_id: str
    tasks_reassigned: int
    tasks_unassigned: int
    auth_account_deleted: bool
    reassigned_to: str | None


class CreatorDeletionResponse(CamelModel):
    success: bool = True
    message: str
    deleted_data: CreatorDeletionData


class ClientTaskSummary(CamelModel):
    id: str
    project_name: str
    work_status: str
    total: float


class ClientTransactionSummary(CamelModel):
    id: str
    amount: float
    date: datetime
    type: str


class ClientDeletionPreviewResponse(CamelModel):
    """Impact of deleting a client: every dependent that would go with it."""

    tasks_count: int
    transactions_count: int
    task_details: list[ClientTaskSummary]
    transaction_details: list[ClientTransactionSummary]


class CreatorOption(CamelModel):
    id: str
    name: str
    email: str


class CreatorTaskSummary(CamelModel):
    id: str
    project_name: str
    client_name: str
    work_status: str
    submission_date: datetime | None


class CreatorDeletionPreviewResponse(CamelModel):
    """Impact of deleting a creator, plus the creators its tasks could move to."""

    assigned_tasks_count: int
    available_creators: list[CreatorOption]
    task_details: list[CreatorTaskSummary]
