"""Checks for message brokers, running processes and databases."""

from __future__ import annotations

from typing import Awaitable, Callable, Dict, Optional, Sequence

from healthcheck.domain.entities import (
    Blocking,
    Deferred,
    HealthCheckElement,
    HealthCheckStatus,
)

BrokerSend = Callable[[str, str, str], Awaitable[bool]]


def broker_check(
    send: BrokerSend,
    topic: str = "health-check",
    key: str = "health",
    value: str = "check",
) -> HealthCheckElement[Deferred]:
    """
    Publish a probe message and expect the broker to acknowledge it.

    `send(topic, key, value)` must return an awaitable resolving to True once
    the message was accepted.
    """

    async def _check() -> HealthCheckStatus:
        delivered = await send(topic, key, value)
        return HealthCheckStatus.of(delivered, "Message broker health-check failed")

    return HealthCheckElement("MessageBroker", Deferred(_check), {"topic": topic})


def process_check(
    is_running: Callable[[], bool],
    runtime_version: str,
    framework_version: Optional[str] = None,
) -> HealthCheckElement[Blocking]:
    """Report whether a long-running process or worker pool is still alive."""
    metadata: Dict[str, str] = {"runtime.version": runtime_version}
    if framework_version is not None:
        metadata["framework.version"] = framework_version

    return HealthCheckElement(
        "Process",
        Blocking(lambda: HealthCheckStatus.of(is_running(), "Process is terminated")),
        metadata,
    )


def database_check(
    select_one: Callable[[], Awaitable[Sequence[int]]],
) -> HealthCheckElement[Deferred]:
    """Run `SELECT 1` through `select_one` and expect a single row `[1]`."""

    async def _check() -> HealthCheckStatus:
        rows = await select_one()
        return HealthCheckStatus.of(list(rows) == [1], "Database is not available")

    return HealthCheckElement("Database", Deferred(_check))
