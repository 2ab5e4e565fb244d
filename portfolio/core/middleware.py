"""Application middleware pipeline.

The pipeline is an explicit ordered list, outermost first. Every entry either
passes the request on or answers it itself.
"""
from typing import List

from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.middleware import Middleware
from starlette.middleware.sessions import SessionMiddleware

from portfolio.core.config import Settings
from portfolio.core.rate_limit import limiter
from portfolio.utils.rate_limit_middleware import GlobalRateLimitMiddleware
from portfolio.utils.request_logging_middleware import RequestLoggingMiddleware
from portfolio.utils.security_headers_middleware import SecurityHeadersMiddleware


def build_middleware(app_settings: Settings) -> List[Middleware]:
    """Build the ordered middleware list for the application."""
    # browsers must not send credentials to a wildcard origin list
    allow_credentials = "*" not in app_settings.CORS_ORIGINS

    return [
        Middleware(RequestLoggingMiddleware),
        Middleware(
            SecurityHeadersMiddleware,
            content_security_policy=app_settings.CONTENT_SECURITY_POLICY,
        ),
        Middleware(
            GlobalRateLimitMiddleware,
            limiter=limiter,
            limit=app_settings.GLOBAL_RATE_LIMIT,
        ),
        Middleware(
            CORSMiddleware,
            allow_origins=app_settings.CORS_ORIGINS,
            allow_credentials=allow_credentials,
            allow_methods=["*"],
            allow_headers=["*"],
        ),
        Middleware(GZipMiddleware, minimum_size=1000),
        Middleware(
            SessionMiddleware,
            secret_key=app_settings.SESSION_SECRET,
            max_age=app_settings.SESSION_MAX_AGE,
            same_site="lax",
            https_only=app_settings.is_production,
        ),
    ]
