"""Abstract repository interface (port) for Task persistence."""

from abc import ABC, abstractmethod

from proflow.domain.entities import Task


class TaskRepository(ABC):
    """Port for task persistence.

    Lookups by foreign key back the deletion workflow; ``update`` is the
    single write primitive for existing tasks.
    """

    @abstractmethod
    async def get_by_id(self, task_id: str) -> Task | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Task]:
        """All tasks, highest ``sl_no`` first."""
        ...

    @abstractmethod
    async def get_by_client_id(self, client_id: str) -> list[Task]:
        ...

    @abstractmethod
    async def get_by_assignee_id(self, assignee_id: str) -> list[Task]:
        ...

    @abstractmethod
    async def create(self, task: Task) -> Task:
        ...

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """Persist an existing task. Raises EntityNotFoundError if it is gone."""
        ...

    @abstractmethod
    async def delete(self, task_id: str) -> bool:
        ...
