"""
Global Exception Handlers

Registers exception handlers that turn every API failure into the standard
error envelope. Each envelope carries verdict "block" so a client that only
inspects the body still fails safe.
"""

import logging
import re
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.models.errors import ErrorResponse, ValidationErrorItem, ValidationErrorResponse
from send_guard.errors import SendGuardError

logger = logging.getLogger(__name__)


def add_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SendGuardError, send_guard_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Exception handlers registered")


def error_code_for(exc: Exception) -> str:
    """Derive an upper snake-case error code from the exception class name."""
    return re.sub(r'(?<!^)(?=[A-Z])', '_', exc.__class__.__name__).upper()


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    log_exception(request, exc, exc.status_code)

    error_response = ErrorResponse(
        message=str(exc.detail),
        error_code=f"HTTP_{exc.status_code}",
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(mode="json")
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle request validation errors with field-level detail.

    Args:
        request: Request that caused exception
        exc: Validation exception

    Returns:
        Detailed validation error response
    """
    log_exception(request, exc, status.HTTP_422_UNPROCESSABLE_ENTITY)

    validation_errors = [
        ValidationErrorItem(
            loc=[str(loc_item) for loc_item in error["loc"]],
            msg=error["msg"],
            type=error["type"]
        )
        for error in exc.errors()
    ]

    error_response = ValidationErrorResponse(
        message="Request validation error",
        error_code="VALIDATION_ERROR",
        validation_errors=validation_errors,
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_response.model_dump(mode="json")
    )


async def send_guard_exception_handler(request: Request, exc: SendGuardError) -> JSONResponse:
    """
    Handle failures raised by the scanning pipeline.

    The message is kept generic so no message content leaks into responses.
    """
    log_exception(request, exc, status.HTTP_500_INTERNAL_SERVER_ERROR, include_traceback=True)

    error_response = ErrorResponse(
        message="Message could not be screened; sending is blocked",
        error_code=error_code_for(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.model_dump(mode="json")
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log_exception(request, exc, status.HTTP_500_INTERNAL_SERVER_ERROR, include_traceback=True)

    error_response = ErrorResponse(
        message="An unexpected error occurred",
        error_code="INTERNAL_SERVER_ERROR",
        details={"type": exc.__class__.__name__},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.model_dump(mode="json")
    )


def log_exception(
    request: Request,
    exc: Exception,
    status_code: int,
    include_traceback: bool = False
) -> None:
    """
    Log exception with request context and appropriate severity.

    Args:
        request: Request that caused exception
        exc: Exception instance
        status_code: HTTP status code
        include_traceback: Whether to include full traceback
    """
    if status_code >= 500:
        log_level = logging.ERROR
    elif status_code >= 400:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO

    message = (
        f"{request.method} {request.url.path} -> {status_code}: "
        f"{exc.__class__.__name__}: {exc}"
    )
    if include_traceback:
        message += "\n" + "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.log(log_level, message)
