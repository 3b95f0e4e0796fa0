"""
Middleware configuration for the application.
Includes Correlation ID setup and request logging middleware.
"""

import time
from typing import Callable

import structlog
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request; method and path are bound for every log call made while handling it."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        fields = {
            # Multipart uploads dominate this figure; photos are capped at MAX_UPLOAD_BYTES.
            "body_bytes": int(request.headers.get("content-length") or 0),
            "content_type": request.headers.get("content-type", "").split(";")[0] or None,
        }

        with structlog.contextvars.bound_contextvars(method=request.method, path=request.url.path):
            try:
                response = await call_next(request)
            except Exception:
                logger.exception("Request failed", duration_ms=_elapsed_ms(start_time), **fields)
                raise

            if "location" in response.headers:
                fields["redirect"] = response.headers["location"]
            logger.info(
                "Request handled",
                status_code=response.status_code,
                duration_ms=_elapsed_ms(start_time),
                **fields,
            )
        return response


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)


def setup_middleware(app: FastAPI) -> None:
    """Setup all middleware for the application."""

    # Starlette runs middleware LIFO: the correlation id wraps the request logger.
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )
