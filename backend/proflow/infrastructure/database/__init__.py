from .base import Base
from .session import engine, async_session_factory
from . import models  # noqa: F401  (registers tables on Base.metadata)

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
]
