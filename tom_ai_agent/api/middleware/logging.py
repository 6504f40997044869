"""
Request logging middleware.
"""

import time
from starlette.middleware.base import BaseHTTPMiddleware

from ...utils.logging import get_logger

logger = get_logger("tom.http")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and latency of every request."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        try:
            resp = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.exception(f"{request.method} {request.url.path} failed after {elapsed_ms:.1f}ms")
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} {resp.status_code} {elapsed_ms:.1f}ms")
        return resp
