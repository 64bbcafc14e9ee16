from __future__ import annotations

import pytest

from healthcheck.application.use_cases.health_check_use_cases import (
    EvaluateHealthCheckUseCase,
)
from healthcheck.domain.entities import HealthCheck, HealthCheckStatus
from tests.conftest import RecordingCheck, raise_error


@pytest.mark.asyncio
async def test_execute_returns_healthy_verdict(healthy_report) -> None:
    use_case = EvaluateHealthCheckUseCase(check_factory=lambda: healthy_report)

    result = await use_case.execute()

    assert result.healthy is True
    assert result.report.statuses[0].name == "service"


@pytest.mark.asyncio
async def test_execute_reports_failure_when_one_check_raises() -> None:
    def _factory() -> HealthCheck:
        return HealthCheck.of("db", raise_error("db down")).with_check(
            "cache", RecordingCheck(HealthCheckStatus.ok())
        )

    result = await EvaluateHealthCheckUseCase(check_factory=_factory).execute()

    assert result.healthy is False
    wire = result.report.to_wire()
    assert wire["statuses"][0]["status"] == {"Failure": {"error": "db down"}}
    assert wire["statuses"][1]["status"] == {"Ok": {}}


@pytest.mark.asyncio
async def test_factory_is_called_for_every_execution() -> None:
    calls: list[int] = []

    def _factory() -> HealthCheck:
        calls.append(1)
        return HealthCheck.ok("service")

    use_case = EvaluateHealthCheckUseCase(check_factory=_factory)
    await use_case.execute()
    await use_case.execute()

    assert calls == [1, 1]
