"""Request logging middleware.

Logs one line per request with the method, path, status code and the time
taken to produce the response.
"""

import time
import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("portfolio.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs every request after it has been handled."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"{request.method} {request.url.path} failed after {process_time:.3f} ms: {str(e)}"
            )
            raise

        process_time = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} {process_time:.3f} ms"
        )
        return response
