"""Mapping of domain errors onto HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from featurevote.domain.error import (
    ConflictError,
    NotFoundError,
    TransactionAbortedError,
    ValidationError,
)
from featurevote.interface.api.schemas import ErrorDetail, ErrorResponse
from featurevote.util.logging import get_logger

logger = get_logger(__name__)

# Request locations that are not part of a field name
_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def _error_response(
    status_code: int, error: str, details: list[ErrorDetail] | None = None
) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(exclude_none=True)
    )


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    """Unknown feature, user or vote."""
    return _error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def handle_validation_error(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """Domain validation failure."""
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        "Validation failed",
        [ErrorDetail(field=exc.field, message=exc.reason)],
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed body, path or query parameters."""
    details = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in _LOCATIONS]
        details.append(ErrorDetail(field=".".join(loc), message=error.get("msg", "")))
    return _error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", details)


async def handle_conflict(request: Request, exc: ConflictError) -> JSONResponse:
    """Uniqueness or integrity violation."""
    return _error_response(status.HTTP_409_CONFLICT, str(exc) or "Resource already exists")


async def handle_transaction_aborted(
    request: Request, exc: TransactionAbortedError
) -> JSONResponse:
    """Vote transaction still aborting after retries; nothing was applied."""
    logfire.warn("Vote transaction unavailable", path=request.url.path, error=str(exc))
    return _error_response(
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Vote could not be applied, please retry",
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Routing and framework errors (unknown path, wrong method)."""
    return _error_response(exc.status_code, str(exc.detail))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    """Anything else: log it and hide the details."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the error envelope handlers on an app.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(ConflictError, handle_conflict)
    app.add_exception_handler(TransactionAbortedError, handle_transaction_aborted)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
