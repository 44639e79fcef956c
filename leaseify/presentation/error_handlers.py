"""Error normalizer — every failure leaves the API as the same JSON body.

Two stages, registered on the FastAPI app:

* not found: a request no route matched becomes a 404 whose message names
  the requested path;
* final: any other error is rendered as ``{message, stack, errors?}`` with
  the status it carries, or 500 when it carries none.

Stack traces are replaced by a placeholder in production.
"""

import logging
import traceback
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from leaseify.application.schemas.error import ErrorBody
from leaseify.domain.exceptions import ValidationFailed

logger = logging.getLogger(__name__)

STACK_PLACEHOLDER = "🥞"
_DEFAULT_STATUS = status.HTTP_200_OK


def resolve_status_code(exc: BaseException) -> int:
    """The status the error carries, unless it is missing or still the default 200."""
    code = getattr(exc, "status_code", None)
    if not isinstance(code, int) or code == _DEFAULT_STATUS:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return code


def error_message(exc: BaseException) -> str:
    detail = getattr(exc, "detail", None)
    if isinstance(detail, str) and detail:
        return detail
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or type(exc).__name__


def build_error_body(
    exc: BaseException,
    *,
    production: bool,
    message: str | None = None,
    errors: list[str] | None = None,
) -> dict[str, Any]:
    """Render the uniform error body; ``errors`` only appears when non-empty."""
    if errors is None:
        carried = getattr(exc, "errors", None)
        if isinstance(carried, list) and carried:
            errors = [str(e) for e in carried]

    stack = STACK_PLACEHOLDER if production else "".join(
        traceback.format_exception(type(exc), exc, exc.__traceback__)
    )
    body = ErrorBody(
        message=message if message is not None else error_message(exc),
        stack=stack,
        errors=errors or None,
    )
    return body.model_dump(exclude_none=True)


def _request_target(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def _format_validation_error(err: dict[str, Any]) -> str:
    loc = [str(p) for p in err.get("loc", ()) if p != "body"]
    field = ".".join(loc)
    return f"{field}: {err.get('msg')}" if field else str(err.get("msg"))


def register_error_handlers(app: FastAPI, *, production: bool) -> None:
    """Install the not-found and final error stages on ``app``."""

    def respond(exc: BaseException, status_code: int, **kwargs: Any) -> JSONResponse:
        body = build_error_body(exc, production=production, **kwargs)
        if status_code >= 500:
            logger.error("%s → %d", body["message"], status_code, exc_info=exc)
        else:
            logger.warning("%s → %d", body["message"], status_code)
        return JSONResponse(status_code=status_code, content=body)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        unmatched = exc.status_code == status.HTTP_404_NOT_FOUND and "endpoint" not in request.scope
        if unmatched:
            return respond(
                exc,
                status.HTTP_404_NOT_FOUND,
                message=f"Not Found - {_request_target(request)}",
            )
        return respond(exc, resolve_status_code(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [_format_validation_error(err) for err in exc.errors()]
        return respond(
            exc,
            status.HTTP_400_BAD_REQUEST,
            message="Validation failed",
            errors=errors,
        )

    @app.exception_handler(ValidationFailed)
    async def domain_validation_handler(request: Request, exc: ValidationFailed) -> JSONResponse:
        return respond(exc, status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        return respond(exc, resolve_status_code(exc))
