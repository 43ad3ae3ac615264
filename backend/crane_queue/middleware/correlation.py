"""
Correlation ID Middleware

Tags every request with a correlation id so that all log lines emitted while
serving it can be grouped. An incoming ``X-Correlation-ID`` header is reused;
otherwise a new id is generated.
"""

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from crane_queue.core.observability import get_logger, set_correlation_id

CORRELATION_HEADER = "X-Correlation-ID"

logger = get_logger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Sets the request correlation id and logs request completion."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        started = time.perf_counter()

        response = await call_next(request)

        response.headers[CORRELATION_HEADER] = correlation_id
        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response
