"""Abstract repository interfaces for the append-only audit and error logs."""

from abc import ABC, abstractmethod

from proflow.domain.entities import AuditLogEntry, ErrorLogEntry


class AuditLogRepository(ABC):
    """Port — append-only store for audit entries."""

    @abstractmethod
    async def append(self, entry: AuditLogEntry) -> AuditLogEntry:
        ...

    @abstractmethod
    async def get_all(self, *, skip: int = 0, limit: int = 100) -> list[AuditLogEntry]:
        """Retrieve audit entries, most recent first."""
        ...


class ErrorLogRepository(ABC):
    """Port — append-only store for error entries."""

    @abstractmethod
    async def append(self, entry: ErrorLogEntry) -> ErrorLogEntry:
        ...
