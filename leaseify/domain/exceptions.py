"""Domain-specific exceptions — framework-independent."""

from collections.abc import Sequence


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ValidationFailed(Exception):
    """Raised when input is rejected before it reaches persistence.

    Carries field-level messages in ``errors`` so the error normalizer can
    include them in the response body.
    """

    status_code = 400

    def __init__(self, message: str, errors: Sequence[str] = ()):
        self.message = message
        self.errors = list(errors)
        super().__init__(message)


class ApiError(Exception):
    """Raised by the transport client when a REST call does not succeed.

    ``status_code`` is ``None`` when no response was received at all
    (connection refused, DNS failure, timeout).
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: Sequence[str] = (),
    ):
        self.message = message
        self.status_code = status_code
        self.errors = list(errors)
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ApiError(status_code={self.status_code!r}, message={self.message!r})"
