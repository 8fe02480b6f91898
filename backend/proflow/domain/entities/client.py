"""Domain entity for a client — the customer who commissions tasks."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Client:
    """A client account.

    Referenced by ``Task.client_id`` and ``Transaction.client_id``; only
    removed through the client deletion workflow, which first removes all
    of its dependents.
    """

    name: str
    email: str = ""
    avatar: str = ""
    data_ai_hint: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
