"""Request Logging - one structured log record per HTTP request.

Invariants:
    - Every request logs method, path, status_code, duration_ms, client_ip, user_agent
    - Exceptions are logged and re-raised; the error handlers shape the response

Design Decisions:
    - BaseHTTPMiddleware over a route dependency: covers 404s and handler errors too
"""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request with its outcome and duration."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        extra = {
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else None,
            "user_agent": request.headers.get("user-agent"),
        }
        try:
            response = await call_next(request)
        except Exception:
            extra["duration_ms"] = round((time.perf_counter() - start) * 1000, 2)
            logger.error("HTTP request failed", extra=extra, exc_info=True)
            raise
        extra["status_code"] = response.status_code
        extra["duration_ms"] = round((time.perf_counter() - start) * 1000, 2)
        logger.info("HTTP request", extra=extra)
        return response
