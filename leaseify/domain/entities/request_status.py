"""Per-operation request status tracked by the client-side resource stores."""

from dataclasses import dataclass, field
from enum import Enum


class RequestStatus(str, Enum):
    """Lifecycle of one logical operation kind (list, get, create, ...)."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class ErrorRecord:
    """Human-readable failure of an operation.

    ``errors`` holds field-level validation messages when the server sent
    them; ``status_code`` is ``None`` for network failures.
    """

    message: str
    errors: tuple[str, ...] = field(default_factory=tuple)
    status_code: int | None = None


@dataclass(frozen=True)
class OperationState:
    """Status and last error for one operation kind."""

    status: RequestStatus = RequestStatus.IDLE
    error: ErrorRecord | None = None

    @property
    def is_loading(self) -> bool:
        return self.status is RequestStatus.LOADING
