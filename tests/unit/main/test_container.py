from __future__ import annotations

import pytest

from healthcheck.application.use_cases.health_check_use_cases import (
    EvaluateHealthCheckUseCase,
)
from healthcheck.domain.entities import EmptyHealthCheckError, HealthCheck
from healthcheck.main.config import AppSettings
from healthcheck.main.container import app_lifespan, init_container


def test_init_container_binds_check_factory() -> None:
    def _factory() -> HealthCheck:
        return HealthCheck.ok("service")

    container = init_container(AppSettings(), _factory)

    assert container.check_factory() is _factory
    assert isinstance(
        container.evaluate_health_check_use_case(), EvaluateHealthCheckUseCase
    )


def test_containers_do_not_share_check_factories() -> None:
    def _first() -> HealthCheck:
        return HealthCheck.ok("first")

    def _second() -> HealthCheck:
        return HealthCheck.ok("second")

    first = init_container(AppSettings(), _first)
    second = init_container(AppSettings(), _second)

    assert first.check_factory() is _first
    assert second.check_factory() is _second


@pytest.mark.asyncio
async def test_app_lifespan_builds_report_once() -> None:
    calls: list[int] = []

    def _factory() -> HealthCheck:
        calls.append(1)
        return HealthCheck.ok("service")

    container = init_container(AppSettings(), _factory)

    async with app_lifespan(container) as managed:
        assert managed is container

    assert calls == [1]


@pytest.mark.asyncio
async def test_app_lifespan_fails_fast_on_construction_error() -> None:
    def _factory() -> HealthCheck:
        return HealthCheck.from_elements([])

    container = init_container(AppSettings(), _factory)

    with pytest.raises(EmptyHealthCheckError):
        async with app_lifespan(container):
            pass
