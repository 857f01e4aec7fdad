"""Error Handlers — global exception handlers for the Parsoid REST API.

Invariants:
    - ParsoidRestError → structured JSON with error code, message, severity
    - Client errors (4xx) tied to a known format are encoded per ERROR_ENCODING
      for that format (plain / html / json)
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three layers: domain (ParsoidRestError), validation (Pydantic), catch-all
    - Kept out of main.py so the app module only wires things together
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from parsoid_rest.api.content_negotiation import build_error_response
from parsoid_rest.core.errors import ErrorCategory, ErrorSeverity, ParsoidRestError
from parsoid_rest.core.format_tables import is_valid_page_format

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(ParsoidRestError, handle_parsoid_rest_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_parsoid_rest_error(request: Request, exc: ParsoidRestError) -> Response:
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"ParsoidRestError: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "format": exc.context.format,
            "content_version": exc.context.content_version,
        },
    )
    if exc.http_status < 500 and is_valid_page_format(exc.context.format or ""):
        return build_error_response(
            exc.context.format, exc.http_status, exc.message, exc.code,
        )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> Response:
    logger.warning(
        f"Validation error on {request.url.path}: {exc.errors()}",
        extra={"path": request.url.path},
    )
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return _envelope(
        status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", "Invalid request data",
        ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details,
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> Response:
    """Catch-all — never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path},
    )
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR",
        "An unexpected error occurred",
        ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
    )


def _envelope(
    status_code: int,
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    details: list[dict] | None = None,
) -> JSONResponse:
    error = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
    }
    if details is not None:
        error["details"] = details
    return JSONResponse(status_code=status_code, content={"error": error})
