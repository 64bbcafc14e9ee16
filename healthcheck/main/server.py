"""Standalone health check server."""

from typing import Optional

import uvicorn

from healthcheck.application.use_cases.health_check_use_cases import CheckFactory
from healthcheck.shared import get_logger

from .app import create_app
from .config import AppSettings, get_settings

logger = get_logger(__name__)


def serve(check_factory: CheckFactory, settings: Optional[AppSettings] = None) -> None:
    """Serve the health check endpoint with uvicorn until interrupted."""
    settings = settings or get_settings()
    app = create_app(check_factory, settings)

    logger.info(
        "server.starting",
        host=settings.server.host,
        port=settings.server.port,
        path=settings.server.path,
    )
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,
    )
