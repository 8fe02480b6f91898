"""Logging setup for the ProFlow API.

Root level and format come from ``LOG_LEVEL`` / ``LOG_FORMAT``; each
category below gets its own level so that, for example, SQL echo or the
Firebase SDK can be turned up without flooding the workflow traces.
"""

import logging
import sys

from proflow.config import Settings, get_settings

# Settings field → logger names whose level it controls
_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_workflow": (
        "ClientDeletionWorkflow",
        "CreatorDeletionWorkflow",
        "proflow.application.services.deletion_workflow",
        "proflow.application.services.audit_trail",
    ),
    "log_level_firebase": ("proflow.infrastructure.firebase", "firebase_admin", "google.auth"),
}


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and per-category log levels. Safe to call more than once."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_level(settings.log_level))
    # uvicorn installs its own handlers; tests and scripts start with none
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(settings.log_format))
        root.addHandler(handler)

    levels = {}
    for field_name, logger_names in _CATEGORIES.items():
        levels[field_name] = getattr(settings, field_name)
        for name in logger_names:
            logging.getLogger(name).setLevel(_level(levels[field_name]))

    logging.getLogger(__name__).debug("Logging configured: root=%s %s", settings.log_level, levels)


def _level(name: str) -> int:
    """Level constant for ``name``; unknown names mean INFO."""
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else logging.INFO
