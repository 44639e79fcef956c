"""Uniform JSON error body produced by the error normalizer."""

from pydantic import BaseModel


class ErrorBody(BaseModel):
    """``errors`` is present only for validation failures."""

    message: str
    stack: str
    errors: list[str] | None = None
