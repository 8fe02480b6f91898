"""Abstract repository interface (port) for Transaction persistence."""

from abc import ABC, abstractmethod

from proflow.domain.entities import Task, Transaction


class TransactionRepository(ABC):
    """Port for payment transaction persistence."""

    @abstractmethod
    async def get_all(self) -> list[Transaction]:
        """All transactions, newest first."""
        ...

    @abstractmethod
    async def get_by_client_id(self, client_id: str) -> list[Transaction]:
        """A client's transactions, newest first."""
        ...

    @abstractmethod
    async def record_payment(self, task: Task, transaction: Transaction) -> Transaction:
        """Persist the paid task and insert the transaction as one unit of work."""
        ...

    @abstractmethod
    async def delete(self, transaction_id: str) -> bool:
        ...
