"""Async engine and session factory for the ProFlow record store."""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from proflow.config import get_settings

_ASYNC_DRIVERS = {
    "sqlite:///": "sqlite+aiosqlite:///",
    "postgresql://": "postgresql+asyncpg://",
    "postgres://": "postgresql+asyncpg://",
}


def to_async_url(url: str) -> str:
    """Swap a plain SQLite/Postgres URL onto its async driver; other URLs pass through."""
    for prefix, replacement in _ASYNC_DRIVERS.items():
        if url.startswith(prefix):
            return replacement + url[len(prefix):]
    return url


settings = get_settings()

engine = create_async_engine(
    to_async_url(settings.database_url),
    # asyncpg connections can be dropped by the server between requests
    pool_pre_ping=not settings.database_url.startswith("sqlite"),
)

# Repositories open one short-lived session per call from this factory, so
# concurrent record-store calls never share a session.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)
