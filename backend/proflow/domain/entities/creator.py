"""Domain entity for a creator (assignee) — the team member who works on tasks."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Creator:
    """A creator account, stored in the ``assignees`` collection."""

    name: str
    email: str = ""
    description: str = ""
    avatar: str = ""
    mobile: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
