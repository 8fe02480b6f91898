"""Domain entity for an in-app notification."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

ADMIN_RECIPIENT = "admin"


@dataclass
class Notification:
    """A message addressed to one user.

    ``user_id`` is ``"admin"`` for the admin inbox, otherwise a client or
    creator id.
    """

    user_id: str
    message: str
    link: str = ""
    is_read: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def mark_read(self) -> None:
        self.is_read = True
