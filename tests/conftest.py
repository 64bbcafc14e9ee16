from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Awaitable, Callable, List

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402

from healthcheck.domain.entities import HealthCheck, HealthCheckStatus  # noqa: E402


class RecordingCheck:
    """Async check that records how many times it ran."""

    def __init__(
        self,
        status: HealthCheckStatus,
        delay: float = 0.0,
        log: List[str] | None = None,
        name: str = "",
    ) -> None:
        self.status = status
        self.delay = delay
        self.calls = 0
        self._log = log
        self._name = name

    async def __call__(self) -> HealthCheckStatus:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self._log is not None:
            self._log.append(self._name)
        return self.status


def raise_error(message: str) -> Callable[[], Awaitable[HealthCheckStatus]]:
    async def _check() -> HealthCheckStatus:
        raise RuntimeError(message)

    return _check


@pytest.fixture()
def healthy_report() -> HealthCheck:
    return HealthCheck.of("service", RecordingCheck(HealthCheckStatus.ok()))


@pytest.fixture()
def failing_report() -> HealthCheck:
    return HealthCheck.of(
        "service", RecordingCheck(HealthCheckStatus.failure("ERROR"))
    ).with_check(
        "other-service",
        RecordingCheck(HealthCheckStatus.ok()),
        {"key": "value"},
    )
