"""
Exception handlers.

Convert application exceptions and request-parsing failures into the
``{success, message, errors}`` envelope every endpoint answers with.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .exceptions import NoteValidationError, QuickNotesError
from .logging import get_logger
from .schemas.common import ErrorResponse
from .schemas.notes import body_errors_from_request

logger = get_logger("errors")


def _log_client_error(request: Request, exc: QuickNotesError, status_code: int) -> None:
    logger.warning("Client error", extra={
        "error_type": type(exc).__name__,
        "reason": exc.message,
        "status": status_code,
        "path": request.url.path,
        "method": request.method,
    })


async def quicknotes_error_handler(request: Request, exc: QuickNotesError) -> JSONResponse:
    """Handle all QuickNotesError subclasses."""
    status_code = exc.status_code
    if status_code >= 500:
        logger.error("Server error", extra={"path": request.url.path, "reason": exc.message})
    else:
        _log_client_error(request, exc, status_code)

    errors = exc.errors if isinstance(exc, NoteValidationError) else None
    body = ErrorResponse(message=exc.message, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle bodies FastAPI could not even parse (e.g. malformed JSON)."""
    return await quicknotes_error_handler(
        request, NoteValidationError(body_errors_from_request(exc.errors()))
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all handlers on the app."""
    app.add_exception_handler(QuickNotesError, quicknotes_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

