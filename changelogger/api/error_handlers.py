"""Error Handlers — global exception handlers for the ChangeLogger API.

Invariants:
    - ChangeLoggerError → {"error": message} with the error's own http_status
    - RequestValidationError → 400 {"error": "..."} (malformed JSON, missing/invalid fields)
    - SQLAlchemyError → 500 {"error": "..."}, driver details never leaked
    - Framework HTTPException (unmatched path 404, 405) → {"error": detail}, same status
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Five-layer handler: domain (ChangeLoggerError), framework (HTTPException),
      validation (Pydantic), store (SQLAlchemy), catch-all (Exception)
    - Client errors logged below ERROR: a bad request is not a server fault
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from changelogger.core.errors import (
    ChangeLoggerError, DatabaseError, ErrorSeverity, ValidationError,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_database_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register ChangeLogger domain/infrastructure error handler."""

    @app.exception_handler(ChangeLoggerError)
    async def changelogger_error_handler(request: Request, exc: ChangeLoggerError):
        """Handle all ChangeLogger domain/infrastructure errors."""
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"ChangeLoggerError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register framework HTTPException handler (unmatched routes, wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Re-shape framework errors into the {"error": string} envelope."""
        logger.info(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request decode/validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        error = build_validation_error(exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_database_error_handler(app: FastAPI) -> None:
    """Register SQLAlchemy error handler."""

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        """Store failures surface as 500 without driver details."""
        error = DatabaseError("unable to complete request", "query")
        logger.error(
            f"Database error on {request.method} {request.url.path}: {exc}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details.

        Route exceptions are answered by the CORS middleware first; this covers
        failures raised outside it.
        """
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )


def build_validation_error(exc: RequestValidationError) -> ValidationError:
    """Collapse Pydantic error details into one client-facing message."""
    details = []
    for e in exc.errors():
        field = ".".join(str(loc) for loc in e["loc"] if loc != "body")
        details.append(f"{field}: {e['msg']}" if field else e["msg"])
    message = "Invalid request data"
    if details:
        message = f"{message}: {'; '.join(details)}"
    return ValidationError(message)
