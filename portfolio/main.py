import json
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import FileResponse, JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio.api.endpoints import contact, health, pages
from portfolio.core.config import PACKAGE_DIR, Settings, settings
from portfolio.core.logging import setup_logging
from portfolio.core.middleware import build_middleware
from portfolio.core.rate_limit import limiter, rate_limit_exceeded_handler
from portfolio.db.mongo import MongoConnection
from portfolio.services.contact_service import build_contact_service
from portfolio.utils.static_files import CachedStaticFiles

logger = logging.getLogger(__name__)

with open(os.path.join(PACKAGE_DIR, "log_config.json"), "r") as file:
    LOGGING_CONFIG = json.load(file)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # open the data store connection
    mongo = MongoConnection(app.state.settings.MONGODB_URI)
    await mongo.connect()
    app.state.mongo = mongo
    yield
    # release it on shutdown
    logger.info("Shutting down: closing data store connection")
    mongo.close()


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code != status.HTTP_404_NOT_FOUND:
            return await http_exception_handler(request, exc)
        return FileResponse(
            os.path.join(app.state.settings.STATIC_DIR, "404.html"),
            status_code=status.HTTP_404_NOT_FOUND,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Something went wrong!"},
        )


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the application with its middleware, routes and collaborators."""
    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        description="Personal portfolio site with a rate limited contact form",
        version="1.0.0",
        lifespan=lifespan,
        middleware=build_middleware(app_settings),
        debug=app_settings.DEBUG,
    )

    app.state.settings = app_settings
    app.state.limiter = limiter
    app.state.contact_service = build_contact_service(app_settings)

    register_exception_handlers(app)

    app.include_router(health.router, tags=["status"])
    app.include_router(contact.router, tags=["contact"])
    app.include_router(pages.router)

    # everything else comes from the public directory
    app.mount(
        "/",
        CachedStaticFiles(directory=app_settings.STATIC_DIR, max_age=app_settings.STATIC_MAX_AGE),
        name="public",
    )

    return app


setup_logging()

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "portfolio.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=LOGGING_CONFIG,
        server_header=False,
    )
