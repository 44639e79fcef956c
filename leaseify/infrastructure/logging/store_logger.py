"""Colored store logger — ANSI-colored console logging for resource store operations.

Every store operation moves through pending → fulfilled | rejected; late
results that lose to a newer request (or to a reset) are discarded. Each
transition gets its own colour so a burst of concurrent fetches is easy to
follow in the terminal.

Color scheme:
    🟡 Yellow  — Pending
    🟢 Green   — Fulfilled
    🔴 Red     — Rejected
    ⚪ Gray    — Discarded / Reset
"""

import logging
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    GRAY = "\033[90m"


# ── Operation Stage Definitions ──────────────────────────────────────

class OperationStage:
    """Predefined operation stages with colors and icons."""

    PENDING = ("PENDING", _Colors.YELLOW, "⏳")
    FULFILLED = ("FULFILLED", _Colors.GREEN, "✅")
    REJECTED = ("REJECTED", _Colors.RED, "❌")
    DISCARDED = ("DISCARDED", _Colors.GRAY, "🗑️")
    RESET = ("RESET", _Colors.GRAY, "↺")


# ── StoreLogger ──────────────────────────────────────────────────────

class StoreLogger:
    """Color-coded logger for one resource store.

    Usage:
        log = StoreLogger("tasks")
        log.transition(OperationStage.PENDING, "list", token=3)
        log.transition(OperationStage.FULFILLED, "list", token=3, items=12)
    """

    def __init__(self, store_name: str):
        self._logger = logging.getLogger(f"leaseify.store.{store_name}")
        self._store = store_name

    def transition(self, stage: tuple[str, str, str], kind: str, **kwargs: Any) -> None:
        """Log a lifecycle transition of operation ``kind``."""
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{self._store}/{kind}{_Colors.RESET}"
        )
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.GRAY}({details}){_Colors.RESET}"

        if stage is OperationStage.REJECTED:
            self._logger.warning(formatted)
        elif stage in (OperationStage.DISCARDED, OperationStage.PENDING):
            self._logger.debug(formatted)
        else:
            self._logger.info(formatted)

    def unexpected(self, kind: str, error: Exception) -> None:
        """Log a failure that did not come from the transport (a bug, not a 4xx)."""
        self._logger.error(
            f"{_Colors.RED}{_Colors.BOLD}❌ [UNEXPECTED]{_Colors.RESET} "
            f"{_Colors.RED}{self._store}/{kind}{_Colors.RESET} "
            f"{_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}",
            exc_info=error,
        )

    def reset(self, epoch: int) -> None:
        self.transition(OperationStage.RESET, "*", epoch=epoch)
