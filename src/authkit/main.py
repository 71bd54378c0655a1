"""FastAPI application factory.

Run with:  uvicorn authkit.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from authkit import __version__
from authkit.api import api_router
from authkit.config import settings
from authkit.core.database.session import close_database, init_database
from authkit.core.errors import register_exception_handlers
from authkit.core.logging import RequestLoggingMiddleware, configure_logging


configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Connect to MongoDB on startup and disconnect on shutdown."""
    logger.info(
        "application_startup",
        app_name=settings.app_name,
        environment=settings.environment,
    )
    await init_database()

    yield

    logger.info("application_shutdown")
    close_database()
    logger.info("database_closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title=settings.app_name,
        description="FastAPI + MongoDB backend boilerplate with users and JWT authentication",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
    )

    cors_origins = settings.cors_origins
    if settings.is_development and not cors_origins:
        cors_origins = ["http://localhost:3000", "http://localhost:5173"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(api_router)

    return app


app = create_app()
