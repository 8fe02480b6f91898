"""Domain entity for an account held by the identity provider."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Identity:
    """Minimal view of an authentication account."""

    uid: str
    email: str
    custom_claims: dict[str, Any] = field(default_factory=dict)
