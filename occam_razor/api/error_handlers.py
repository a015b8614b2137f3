"""Error Handlers — map exceptions that escape a route to HTTP responses.

Invariants:
    - Every non-200 body is an OccamError.to_response() envelope
    - A non-object request body is a 400 VALIDATION_ERROR with per-field details
    - Unexpected exceptions become a 500 INTERNAL_ERROR without internal details

Design Decisions:
    - Engine outcomes (ERROR included) are in-band 200 responses and never reach these
    - Validation and catch-all failures are wrapped in OccamError so all three
      paths share one envelope
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from occam_razor.core.errors import (
    ErrorCategory,
    ErrorSeverity,
    OccamError,
    ToolValidationError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OccamError, handle_occam_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


def _respond(exc: OccamError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_occam_error(request: Request, exc: OccamError) -> JSONResponse:
    logger.warning(
        f"Request rejected: {exc.message}",
        extra={"error_code": exc.code, "tool_name": exc.context.tool_name},
    )
    return _respond(exc)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    logger.warning(f"Invalid request body on {request.url.path}: {exc.errors()}")
    errors = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return _respond(ToolValidationError("Invalid request data", errors=errors))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return _respond(OccamError(
        "An unexpected error occurred", "INTERNAL_ERROR",
        ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, http_status=500,
    ))
