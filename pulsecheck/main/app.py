"""
Main Application - Main Layer

Entry point for the FastAPI application: configures logging, initializes
the container and mounts the routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI

from pulsecheck.main.config import get_settings
from pulsecheck.main.container import app_lifespan, init_container
from pulsecheck.presentation.controllers import system_router
from pulsecheck.shared import configure_logging, get_logger, update_logging_from_settings

# Bootstrap logging so settings errors are reported.
configure_logging()

settings = get_settings()

update_logging_from_settings(settings)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open dependency clients on startup and close them on shutdown."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("Application starting up")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("Application shutting down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()

    init_container(settings)

    app = FastAPI(
        title=settings.app.title,
        description=settings.app.description,
        version=settings.app.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.include_router(system_router)

    return app


app = create_app()
