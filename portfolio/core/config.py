"""Configuration settings for the portfolio site.

This module manages environment variables and application settings.
"""
import logging
import os
import secrets

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Settings:
    """Application settings.

    Attributes:
        PROJECT_NAME: Name of the project
        ENVIRONMENT: Deployment environment, "development" or "production"
        DEBUG: Debug mode flag
        HOST: Interface the server listens on
        PORT: Port the server listens on
        LOG_LEVEL: Root log level
        MONGODB_URI: Connection string of the data store
        SESSION_SECRET: Key used to sign session cookies
        RATE_LIMIT_STORAGE_URI: Storage backend for rate limit counters
        GLOBAL_RATE_LIMIT: Default per-client limit for every route
        CONTACT_RATE_LIMIT: Per-client limit for contact form submissions
        CONTACT_ACCEPT_DELAY: Simulated processing time of an accepted submission
        STATIC_DIR: Directory holding the public pages and assets
        STATIC_MAX_AGE: Cache max-age in seconds for pages and assets
    """
    def __init__(self):
        self.PROJECT_NAME = "Portfolio Site"
        self.ENVIRONMENT = os.getenv("ENVIRONMENT", "development").lower()
        self.DEBUG = os.getenv("DEBUG", "False").lower() == "true"
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = int(os.getenv("PORT", 3000))
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        # Data store
        self.MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017/portfolio")

        # Session Settings
        self.SESSION_SECRET = os.getenv("SESSION_SECRET")
        if not self.SESSION_SECRET:
            if self.is_production:
                raise ValueError("SESSION_SECRET environment variable is not set")
            logger.warning(
                "SESSION_SECRET is not set, using a random per-process secret. "
                "Sessions will not survive a restart."
            )
            self.SESSION_SECRET = secrets.token_urlsafe(32)
        self.SESSION_MAX_AGE = int(os.getenv("SESSION_MAX_AGE", 14 * 24 * 60 * 60))

        # Redis Settings
        self.REDIS_HOST = os.getenv("REDIS_HOST")
        self.REDIS_PORT = int(os.getenv("REDIS_PORT", 6379))

        # Rate limiting
        self.RATE_LIMIT_STORAGE_URI = os.getenv("RATE_LIMIT_STORAGE_URI")
        if not self.RATE_LIMIT_STORAGE_URI:
            if self.REDIS_HOST:
                self.RATE_LIMIT_STORAGE_URI = f"redis://{self.REDIS_HOST}:{self.REDIS_PORT}/0"
            else:
                self.RATE_LIMIT_STORAGE_URI = "memory://"
        if self.is_production and self.RATE_LIMIT_STORAGE_URI.startswith("memory://"):
            logger.warning(
                "Rate limit counters are kept in process memory. "
                "Set REDIS_HOST or RATE_LIMIT_STORAGE_URI to share them between workers."
            )
        self.GLOBAL_RATE_LIMIT = os.getenv("GLOBAL_RATE_LIMIT", "100/15 minutes")
        self.CONTACT_RATE_LIMIT = os.getenv("CONTACT_RATE_LIMIT", "5/hour")

        # Contact form
        self.CONTACT_ACCEPT_DELAY = float(os.getenv("CONTACT_ACCEPT_DELAY", 1.0))

        # Static files
        self.STATIC_DIR = os.getenv("STATIC_DIR", os.path.join(PACKAGE_DIR, "public"))
        self.STATIC_MAX_AGE = int(os.getenv("STATIC_MAX_AGE", 86400))

        # HTTP
        self.CORS_ORIGINS = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.CONTENT_SECURITY_POLICY = os.getenv("CONTENT_SECURITY_POLICY")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()
