"""
HTTP observability middleware.

CorrelationMiddleware tags each request with an X-Correlation-ID so that
every log line emitted while serving it (provider calls, chunk progress,
parse failures) can be grouped. RequestLoggingMiddleware logs method,
path, status, and latency.

Dependencies: fastapi, starlette, backend.observability.correlation
System role: Request tracing and access logging
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from backend.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with status and duration."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        route = f"{request.method} {request.url.path}"

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{route} failed after {_elapsed_ms(started)}ms: {type(e).__name__}",
                extra={"path": request.url.path, "error_type": type(e).__name__},
            )
            raise

        logger.info(
            f"{route} -> {response.status_code} ({_elapsed_ms(started)}ms)",
            extra={"path": request.url.path, "status_code": response.status_code},
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind a correlation ID for the lifetime of each request."""

    async def dispatch(self, request: Request, call_next):
        """
        Reuse the caller's X-Correlation-ID or mint one, and echo it back.

        Args:
            request: Incoming request
            call_next: Downstream handler

        Returns:
            Response: Response carrying the X-Correlation-ID header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
