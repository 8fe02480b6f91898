"""Colored workflow logger — ANSI-colored console logging for admin deletion workflows.

Provides a WorkflowLogger with color-coded output per workflow stage,
so a client or creator teardown can be traced step by step in the terminal.

Color scheme:
    🟡 Yellow  — Authorization
    🔵 Blue    — Loading the target / gathering dependents
    🟣 Magenta — Mutating dependents (delete / reassign fan-out)
    🩵 Cyan    — Identity account removal
    🟢 Green   — Root record removal / audit / completion
    🔴 Red     — Errors
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, NamedTuple


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


class Stage(NamedTuple):
    label: str
    color: str
    icon: str


class WorkflowStage:
    """The stages a deletion workflow passes through."""

    AUTHORIZE = Stage("AUTHORIZE", _Colors.YELLOW, "🔐")
    LOAD = Stage("LOAD", _Colors.BLUE, "📄")
    GATHER = Stage("GATHER", _Colors.BLUE, "🔎")
    MUTATE = Stage("MUTATE", _Colors.MAGENTA, "✂️")
    IDENTITY = Stage("IDENTITY", _Colors.CYAN, "👤")
    ROOT_DELETE = Stage("ROOT_DELETE", _Colors.GREEN, "🗑️")
    AUDIT = Stage("AUDIT", _Colors.GREEN, "📝")
    ERROR = Stage("ERROR", _Colors.RED, "❌")
    COMPLETE = Stage("COMPLETE", _Colors.GREEN, "✅")


class WorkflowLogger:
    """Color-coded logger for one deletion workflow.

    Usage:
        log = WorkflowLogger("ClientDeletionWorkflow", "DELETE CLIENT")
        log.step_start(WorkflowStage.GATHER, "Loading dependents", client_id="c1")
        log.detail("Found 3 tasks")
        log.step_complete(WorkflowStage.GATHER, "Dependents loaded")
    """

    def __init__(self, logger_name: str, label: str):
        self._logger = logging.getLogger(logger_name)
        self._label = label

    def _line(
        self,
        head: str,
        body: str,
        fields: dict[str, Any] | None = None,
        error: Exception | None = None,
    ) -> str:
        line = f"{_Colors.GRAY}[{self._label}]{_Colors.RESET} {head}{_Colors.RESET} {body}{_Colors.RESET}"
        if fields:
            pairs = " | ".join(f"{k}={v}" for k, v in fields.items())
            line += f" {_Colors.GRAY}({pairs}){_Colors.RESET}"
        if error is not None:
            line += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        return line

    def step_start(self, stage: Stage, message: str, **fields: Any) -> None:
        head = f"{stage.color}{_Colors.BOLD}{stage.icon} [{stage.label}]"
        self._logger.info(self._line(head, f"{stage.color}{message}", fields))

    def step_complete(self, stage: Stage, message: str, **fields: Any) -> None:
        head = f"{stage.color}{stage.icon} [{stage.label}]"
        self._logger.info(self._line(head, f"{_Colors.GREEN}✓ {message}", fields))

    def step_warning(self, stage: Stage, message: str, error: Exception | None = None) -> None:
        """A tolerated problem; the workflow carries on."""
        head = f"{_Colors.YELLOW}{stage.icon} [{stage.label}]"
        self._logger.warning(self._line(head, f"{_Colors.YELLOW}{message}", error=error))

    def step_error(self, stage: Stage, message: str, error: Exception | None = None) -> None:
        head = f"{_Colors.RED}{_Colors.BOLD}❌ [{stage.label}]"
        self._logger.error(self._line(head, f"{_Colors.RED}{message}", error=error))

    def detail(self, message: str, **fields: Any) -> None:
        """Debug-level detail line, dimmed."""
        self._logger.debug(self._line("  ", f"{_Colors.GRAY}├─ {message}", fields))

    @contextmanager
    def timed_step(self, stage: Stage, message: str, **fields: Any):
        """Log start and end of a block with its elapsed time; failures are logged and re-raised."""
        self.step_start(stage, message, **fields)
        start = time.perf_counter()
        try:
            yield
        except Exception as exc:
            self.step_error(stage, f"{message} — failed after {time.perf_counter() - start:.2f}s", error=exc)
            raise
        self.step_complete(stage, f"{message} — {time.perf_counter() - start:.2f}s")
