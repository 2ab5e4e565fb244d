"""Per-client request rate limiting.

A single slowapi ``Limiter`` keyed by client address. The global limit is
enforced for every request by ``GlobalRateLimitMiddleware``; the contact form
adds its own stricter limit with ``@limiter.limit``.

The limiter and its storage are process-wide and configured from the
environment at import, because route decorators bind to them when the
endpoint modules load. The global limit itself is read per application.
"""
import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from portfolio.core.config import settings

logger = logging.getLogger(__name__)

TOO_MANY_REQUESTS_MESSAGE = "Too many requests, please try again later."

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="moving-window",
)


def too_many_requests_response(request: Request, detail: str) -> JSONResponse:
    logger.warning(
        f"Rate limit exceeded for {get_remote_address(request)} on "
        f"{request.method} {request.url.path}: {detail}"
    )
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"error": TOO_MANY_REQUESTS_MESSAGE},
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Turn a slowapi ``RateLimitExceeded`` into a 429 JSON response."""
    return too_many_requests_response(request, exc.detail)
