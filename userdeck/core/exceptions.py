"""
Application exceptions and their HTTP translation.
Errors reach the client as short plain-text bodies; detail stays in the logs.
"""

from typing import Any, Dict, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class StartupFailure(AppError):
    """Storage directory or schema could not be prepared; the process must not serve."""

    def __init__(self, message: str = "Startup failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)


class UploadTooLarge(AppError):
    """Uploaded file exceeds the configured size limit."""

    def __init__(self, message: str = "File too large", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, details)


class DatabaseError(AppError):
    """Connection or constraint failure while talking to the database."""

    def __init__(self, message: str = "Database error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)


async def app_error_handler(request: Request, exc: AppError) -> PlainTextResponse:
    if exc.status_code >= 500:
        logger.error(
            "Request error",
            error=exc.__class__.__name__,
            message=exc.message,
            path=request.url.path,
            details=exc.details,
        )
    else:
        logger.warning(
            "Request rejected",
            error=exc.__class__.__name__,
            message=exc.message,
            path=request.url.path,
        )
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def global_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Handle all uncaught exceptions globally."""
    logger.error("Unhandled error", path=request.url.path, exc_info=exc)
    return PlainTextResponse(
        "Internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
