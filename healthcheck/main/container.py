"""
Dependency container injection module - Main Layer

Each application owns its container. The check factory is the only external
input: it is handed to `init_container` by the application factory and
re-invoked on every request.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from healthcheck.application.use_cases.health_check_use_cases import (
    CheckFactory,
    EvaluateHealthCheckUseCase,
)
from healthcheck.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    config = providers.Configuration()

    check_factory = providers.Dependency()

    evaluate_health_check_use_case = providers.Factory(
        EvaluateHealthCheckUseCase,
        check_factory=check_factory,
    )


def init_container(settings: AppSettings, check_factory: CheckFactory) -> AppContainer:
    """Build a container bound to `settings` and `check_factory`."""

    container = AppContainer()
    container.config.from_pydantic(settings)
    container.check_factory.override(providers.Object(check_factory))
    return container


@asynccontextmanager
async def app_lifespan(container: AppContainer):
    """
    Validate the check factory once at startup.

    Building the report up front makes an empty or malformed report fail at
    startup rather than on the first request. Nothing is evaluated here.
    """
    health_check = container.check_factory()()
    logger.info("container.healthcheck.registered", checks=health_check.names)

    try:
        yield container
    finally:
        logger.info("container.shutdown")
