"""
Outcome carriers.

A check's status is held by an outcome: something that can be resolved to a
`HealthCheckStatus`. The same element and report types are used for checks
that still have to run and for checks that already have a result; only the
carrier differs.

- `Resolved` holds a status that is already known.
- `Deferred` wraps a zero-argument callable run on the event loop; its
  result is awaited when it is awaitable.
- `Blocking` wraps a zero-argument synchronous callable that is run in a
  worker thread so it does not block the event loop.
"""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Protocol, Union, runtime_checkable

from healthcheck.domain.entities.errors import InvalidHealthCheckError
from healthcheck.domain.entities.status import HealthCheckStatus


@runtime_checkable
class Outcome(Protocol):
    """Anything that can be resolved to a health check status."""

    async def resolve(self) -> HealthCheckStatus:
        ...


@dataclass(frozen=True, slots=True)
class Resolved:
    status: HealthCheckStatus

    async def resolve(self) -> HealthCheckStatus:
        return self.status


@dataclass(frozen=True, slots=True)
class Deferred:
    factory: Callable[[], Union[HealthCheckStatus, Awaitable[HealthCheckStatus]]]

    async def resolve(self) -> HealthCheckStatus:
        result = self.factory()
        if inspect.isawaitable(result):
            result = await result
        return result


@dataclass(frozen=True, slots=True)
class Blocking:
    factory: Callable[[], HealthCheckStatus]

    async def resolve(self) -> HealthCheckStatus:
        return await asyncio.to_thread(self.factory)


CheckLike = Union[HealthCheckStatus, Outcome, Callable[[], Any]]


def as_outcome(check: CheckLike) -> Outcome:
    """
    Coerce a status, an outcome or a zero-argument callable to an outcome.

    Bare awaitables are rejected: a coroutine can only be awaited once, while
    a report may be evaluated many times.
    """
    if isinstance(check, HealthCheckStatus):
        return Resolved(check)
    if isinstance(check, Outcome):
        return check
    if inspect.isawaitable(check):
        raise InvalidHealthCheckError(
            "Awaitables cannot be evaluated twice; pass a callable returning one",
            details={"check": repr(check)},
        )
    if callable(check):
        return Deferred(check)
    raise InvalidHealthCheckError(
        "Unsupported check type", details={"type": type(check).__name__}
    )


def to_deferred(outcome: Outcome) -> Outcome:
    """Re-express an outcome as `Deferred` without running it."""
    if isinstance(outcome, Deferred):
        return outcome
    if isinstance(outcome, Resolved):
        status = outcome.status
        return Deferred(lambda: status)
    if isinstance(outcome, Blocking):
        factory = outcome.factory
        return Deferred(lambda: asyncio.to_thread(factory))
    return Deferred(outcome.resolve)
