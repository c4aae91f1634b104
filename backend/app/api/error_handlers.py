"""Error Handlers — global exception handlers mapping failures to HTTP responses.

Invariants:
    - WalksError → its own http_status (400 invalid id / missing fields /
      duplicate keyword, 404 not found, 500 storage) with the structured envelope
    - RequestValidationError → 400 with field-level details
    - SQLAlchemyError reaching the app → 500 StorageError carrying the driver message
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain, validation, storage, catch-all
    - Extracted from main.py (ADR: ExMA import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import (
    ErrorCategory, ErrorSeverity, StorageError, WalksError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_walks_error_handler(app)
    _register_validation_error_handler(app)
    _register_storage_error_handler(app)
    _register_generic_error_handler(app)


def walks_error_response(exc: WalksError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_walks_error_handler(app: FastAPI) -> None:
    """Register walks domain/infrastructure error handler."""

    @app.exception_handler(WalksError)
    async def walks_error_handler(request: Request, exc: WalksError):
        """Handle all walks domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"WalksError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "walk_id": exc.context.walk_id,
            },
        )
        return walks_error_response(exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_storage_error_handler(app: FastAPI) -> None:
    """Register handler for driver errors that escaped the session manager."""

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(
            f"Storage error on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "STORAGE_ERROR", "path": request.url.path},
        )
        orig = getattr(exc, "orig", None)
        return walks_error_response(StorageError(str(orig or exc), "query"))


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
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


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "REQUEST_VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.WARNING.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
