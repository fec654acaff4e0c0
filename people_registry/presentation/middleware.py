"""Request logging middleware."""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, origin, status and elapsed time of every request."""

    async def dispatch(self, request, call_next):
        origin = request.headers.get("origin", "<no-origin>")
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.exception(
                "%s %s origin=%s failed after %.1fms",
                request.method, request.url.path, origin, elapsed_ms,
            )
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s origin=%s -> %d (%.1fms)",
            request.method, request.url.path, origin, response.status_code, elapsed_ms,
        )
        return response
