"""Request logging middleware."""

import logging
import time
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = structlog.get_logger()

# Load balancer health checks would otherwise dominate the info log.
QUIET_PATHS = frozenset({"/health"})

_REQUEST_KEYS = ("method", "path", "client")


def level_for(path: str, status_code: int) -> int:
    """Pick the log level for a finished request."""
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    if path in QUIET_PATHS:
        return logging.DEBUG
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with outcome and timing."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start_time = time.perf_counter()
        path = request.url.path

        structlog.contextvars.bind_contextvars(
            method=request.method,
            path=path,
            client=request.client.host if request.client else None,
        )
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "request_failed",
                error=str(e),
                duration_ms=_elapsed_ms(start_time),
            )
            structlog.contextvars.unbind_contextvars(*_REQUEST_KEYS)
            raise

        logger.log(
            level_for(path, response.status_code),
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(start_time),
        )
        structlog.contextvars.unbind_contextvars(*_REQUEST_KEYS)
        return response


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)
