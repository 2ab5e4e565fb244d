"""Global rate limit middleware.

Counts every request against one per-client limit before it reaches routing,
so pages, static assets and unknown paths are limited alike.
"""

from fastapi import Request
from limits import parse
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware

from portfolio.core.rate_limit import too_many_requests_response

GLOBAL_LIMIT_SCOPE = "global"


class GlobalRateLimitMiddleware(BaseHTTPMiddleware):
    """Middleware that rejects clients over the global limit with a 429.

    Args:
        app: ASGI application to wrap
        limiter: slowapi limiter whose storage keeps the counters
        limit: Limit string such as "100/15 minutes"
    """

    def __init__(self, app, limiter: Limiter, limit: str):
        super().__init__(app)
        self.limiter = limiter
        self.limit = limit
        self.limit_item = parse(limit)

    async def dispatch(self, request: Request, call_next):
        if self.limiter.enabled:
            client = get_remote_address(request)
            if not self.limiter.limiter.hit(self.limit_item, GLOBAL_LIMIT_SCOPE, client):
                return too_many_requests_response(request, self.limit)
        return await call_next(request)
