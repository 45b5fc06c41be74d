"""Global exception handlers for consistent error responses.

Every failure leaves the API as an ``ErrorResponse`` body
(``{"type": ..., "message": ...}``).
"""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jalanma.core.exceptions import AppException
from jalanma.models.error import ErrorResponse

logger = logging.getLogger("jalanma.exception")


def _error_response(status_code: int, error_type: str, message: str) -> JSONResponse:
    body = ErrorResponse(type=error_type, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _format_validation_errors(errors: Sequence[Any]) -> str:
    """Flatten Pydantic errors into ``field: msg; field: msg``."""
    messages = []
    for error in errors:
        field = ".".join(
            str(loc) for loc in error["loc"] if loc not in ("body", "query")
        )
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(messages)


def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle all AppException subclasses."""
    extra = {
        "method": request.method,
        "path": request.url.path,
        "status_code": exc.status_code,
        "error_type": exc.error_type,
    }
    if exc.status_code >= 500:
        logger.error("AppException: %s - %s", exc.error_type, exc.message, extra=extra)
    else:
        logger.info("AppException: %s - %s", exc.error_type, exc.message, extra=extra)
    return _error_response(exc.status_code, exc.error_type, exc.message)


def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTPException raised by routing (404/405) or by Starlette."""
    return _error_response(exc.status_code, "http_error", str(exc.detail))


def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors with unified format."""
    message = _format_validation_errors(exc.errors())
    logger.info(
        "Validation failed: %s",
        message,
        extra={"method": request.method, "path": request.url.path, "status_code": 422},
    )
    return _error_response(422, "validation_error", message)


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors (storage failures included)."""
    logger.error(
        "Unhandled exception: %s %s - %s",
        request.method,
        request.url.path,
        exc,
        extra={"method": request.method, "path": request.url.path, "status_code": 500},
        exc_info=True,
    )
    return _error_response(500, "internal_error", "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
