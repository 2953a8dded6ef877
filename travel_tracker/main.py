"""
FastAPI application setup.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager

from travel_tracker.config import get_settings
from travel_tracker.core.db import init_db
from travel_tracker.core.error_handlers import setup_error_handlers
from travel_tracker.core.logging import configure_logging
from travel_tracker.middleware import RequestContextMiddleware

settings = get_settings()

configure_logging(settings.log_level.value, settings.log_format)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.
    Creates tables on startup when configured to.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    if settings.auto_create_tables:
        init_db()
        logger.info("Database tables ensured")

    logger.info("Application startup complete")
    yield
    logger.info("Shutting down application")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        docs_url=None if settings.is_production() else "/docs",
        redoc_url=None if settings.is_production() else "/redoc",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )

    # Outermost so every response, errors included, carries X-Request-ID
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    from travel_tracker.api import (
        auth_router,
        trips_router,
        stats_router,
        settings_router,
        health_router,
    )
    app.include_router(auth_router)
    app.include_router(trips_router)
    app.include_router(stats_router)
    app.include_router(settings_router)
    app.include_router(health_router)

    @app.get("/")
    async def root():
        """Root endpoint for basic health check."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    return app


# Create application instance
app = create_app()
