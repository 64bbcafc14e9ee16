"""
Main Application - Main Layer

Builds the FastAPI application serving the health check endpoint.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI

from healthcheck.application.use_cases.health_check_use_cases import CheckFactory
from healthcheck.presentation.controllers import build_router
from healthcheck.shared import get_logger, update_logging_from_settings

from .config import AppSettings, get_settings
from .container import app_lifespan, init_container

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Record the start time and run the container lifecycle."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("Application starting up")

    async with app_lifespan(app.state.container):
        yield

    logger.info("Application shutting down")


def create_app(
    check_factory: CheckFactory, settings: Optional[AppSettings] = None
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        check_factory: Zero-argument callable returning the `HealthCheck` to
            evaluate. Called again for every request.
        settings: Application settings; loaded from the environment if omitted.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = settings or get_settings()
    update_logging_from_settings(settings)

    container = init_container(settings, check_factory)

    app = FastAPI(
        title=settings.server.title,
        description=settings.server.description,
        version=settings.server.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.container = container
    app.include_router(build_router(settings.server.path))

    return app
