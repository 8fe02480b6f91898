"""Domain types describing the progress and outcome of a deletion workflow."""

from dataclasses import dataclass, field
from enum import Enum

UNASSIGN = "unassign"


class DeletionStep(str, Enum):
    """Steps of a deletion workflow, in the order they complete."""

    STARTED = "started"
    AUTHORIZED = "authorized"
    DEPENDENTS_LOADED = "dependents_loaded"
    DEPENDENTS_MUTATED = "dependents_mutated"
    IDENTITY_HANDLED = "identity_handled"
    ROOT_DELETED = "root_deleted"
    AUDITED = "audited"


@dataclass
class DeletionProgress:
    """Mutable step log for one workflow run.

    Tracks the last step that completed and which dependent ids were
    mutated (or failed to be) during the fan-out, so a failed run can be
    reconciled from its error log entry.
    """

    target_id: str
    step: DeletionStep = DeletionStep.STARTED
    mutated_ids: list[str] = field(default_factory=list)
    failed_ids: list[str] = field(default_factory=list)

    def advance(self, step: DeletionStep) -> None:
        self.step = step

    def as_details(self) -> dict:
        return {
            "targetId": self.target_id,
            "lastCompletedStep": self.step.value,
            "mutatedIds": list(self.mutated_ids),
            "failedIds": list(self.failed_ids),
        }


@dataclass
class ClientDeletionResult:
    client_id: str
    tasks_deleted: int
    transactions_deleted: int
    auth_account_deleted: bool
    notifications_deleted: int = 0


@dataclass
class CreatorDeletionResult:
    creator_id: str
    tasks_reassigned: int
    tasks_unassigned: int
    auth_account_deleted: bool
    reassigned_to: str | None = None
    notifications_deleted: int = 0


@dataclass
class ClientDeletionPreview:
    """Dependents that a client deletion would remove."""

    tasks: list = field(default_factory=list)
    transactions: list = field(default_factory=list)


@dataclass
class CreatorDeletionPreview:
    """Tasks a creator deletion would detach, and the creators they could move to."""

    tasks: list = field(default_factory=list)
    available_creators: list = field(default_factory=list)
