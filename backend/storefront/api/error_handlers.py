"""Error Handlers — map Storefront failures to HTTP responses and structured logs.

Invariants:
    - DatabaseError → 503, logged with the failed operation and the request's threshold
    - CollectionConsumedError → 500, logged with traceback (a wrapper was reused)
    - Any other StorefrontError → its own http_status and envelope
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Routes record the price threshold on request.state; handlers read it back,
      so errors raised during dependency teardown still log it
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from storefront.core.errors import (
    CollectionConsumedError, DatabaseError, ErrorCategory, ErrorSeverity,
    StorefrontError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(CollectionConsumedError, consumed_error_handler)
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)


def _request_extra(request: Request, exc: StorefrontError) -> dict:
    return {
        "error_code": exc.code,
        "path": request.url.path,
        "threshold": getattr(request.state, "threshold", None),
    }


def _envelope(exc: StorefrontError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def database_error_handler(request: Request, exc: DatabaseError):
    """Data-access failure: no partial result was produced."""
    logger.error(
        f"Database {exc.operation} failed on {request.url.path}",
        extra={**_request_extra(request, exc), "operation": exc.operation},
    )
    return _envelope(exc)


async def consumed_error_handler(request: Request, exc: CollectionConsumedError):
    """A Products wrapper was traversed twice within one request."""
    logger.error(
        f"Products collection reused on {request.url.path}",
        extra=_request_extra(request, exc),
        exc_info=exc,
    )
    return _envelope(exc)


async def storefront_error_handler(request: Request, exc: StorefrontError):
    logger.error(
        f"StorefrontError: {exc.message}", extra=_request_extra(request, exc),
    )
    return _envelope(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Pydantic validation failure at the API boundary."""
    logger.warning(
        f"Validation error on {request.url.path}: {exc.errors()}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request data",
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.ERROR.value,
                "details": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in exc.errors()
                ],
            },
        },
    )


async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all — never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )
