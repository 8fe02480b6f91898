"""Read-only impact previews shown before a client or creator is deleted."""

import asyncio

from proflow.application.interfaces import CreatorRepository, TaskRepository, TransactionRepository
from proflow.domain.entities import ClientDeletionPreview, CreatorDeletionPreview
from proflow.domain.exceptions import InvalidRequestError


class DeletionPreviewService:
    """Collects the dependents a deletion would touch. Performs no writes."""

    def __init__(
        self,
        tasks: TaskRepository,
        transactions: TransactionRepository,
        creators: CreatorRepository,
    ):
        self._tasks = tasks
        self._transactions = transactions
        self._creators = creators

    async def preview_client_deletion(self, client_id: str | None) -> ClientDeletionPreview:
        if not client_id or not client_id.strip():
            raise InvalidRequestError("Client ID is required")
        client_id = client_id.strip()
        tasks, transactions = await asyncio.gather(
            self._tasks.get_by_client_id(client_id),
            self._transactions.get_by_client_id(client_id),
        )
        return ClientDeletionPreview(tasks=tasks, transactions=transactions)

    async def preview_creator_deletion(self, creator_id: str | None) -> CreatorDeletionPreview:
        if not creator_id or not creator_id.strip():
            raise InvalidRequestError("Creator ID is required")
        creator_id = creator_id.strip()
        tasks, creators = await asyncio.gather(
            self._tasks.get_by_assignee_id(creator_id),
            self._creators.get_all(),
        )
        return CreatorDeletionPreview(
            tasks=tasks,
            available_creators=[c for c in creators if c.id != creator_id],
        )
