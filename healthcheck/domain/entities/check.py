"""
Health check report.

A `HealthCheck` is an ordered, non-empty, immutable collection of named
checks. The same types describe checks that still have to run (`Deferred`,
`Blocking` outcomes) and checks that already ran (`Resolved` outcomes):
evaluating a report produces a new report of resolved elements, in the
original order.

Failures of individual checks are isolated during evaluation: any exception
raised by a check becomes a `Failure` status for that check only.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
)

from healthcheck.domain.entities.errors import (
    EmptyHealthCheckError,
    InvalidHealthCheckError,
)
from healthcheck.domain.entities.outcomes import (
    CheckLike,
    Outcome,
    Resolved,
    as_outcome,
    to_deferred,
)
from healthcheck.domain.entities.status import HealthCheckStatus
from healthcheck.shared import get_logger

logger = get_logger(__name__)

OutcomeT = TypeVar("OutcomeT", bound=Outcome)
TargetT = TypeVar("TargetT", bound=Outcome)
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class HealthCheckElement(Generic[OutcomeT]):
    """A single named check with its outcome and metadata."""

    name: str
    status: OutcomeT
    metadata: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidHealthCheckError(
                "Health check name must be a non-empty string",
                details={"name": self.name},
            )
        metadata = {str(key): str(value) for key, value in self.metadata.items()}
        object.__setattr__(self, "metadata", MappingProxyType(metadata))

    @property
    def result(self) -> HealthCheckStatus:
        """Status of a resolved element."""
        if not isinstance(self.status, Resolved):
            raise InvalidHealthCheckError(
                f"Health check '{self.name}' has not been evaluated",
                details={"outcome": type(self.status).__name__},
            )
        return self.status.status

    def transform(
        self, fn: Callable[[OutcomeT], TargetT]
    ) -> "HealthCheckElement[TargetT]":
        return HealthCheckElement(self.name, fn(self.status), self.metadata)


async def _recover(element: HealthCheckElement[Outcome]) -> HealthCheckElement[Resolved]:
    """Resolve one element, turning any exception into a `Failure` status."""
    try:
        status = await element.status.resolve()
        if not isinstance(status, HealthCheckStatus):
            raise TypeError(
                f"Check returned {type(status).__name__}, expected HealthCheckStatus"
            )
    except Exception as exc:
        logger.warning(
            "healthcheck.element.failed",
            check=element.name,
            error=str(exc),
            exc_info=exc,
        )
        status = HealthCheckStatus.from_exception(exc)
    return HealthCheckElement(element.name, Resolved(status), element.metadata)


@dataclass(frozen=True, slots=True)
class HealthCheck(Generic[OutcomeT]):
    """Ordered, non-empty collection of health checks."""

    statuses: Tuple[HealthCheckElement[OutcomeT], ...]

    def __post_init__(self) -> None:
        statuses = tuple(self.statuses)
        if not statuses:
            raise EmptyHealthCheckError()
        object.__setattr__(self, "statuses", statuses)

    # Construction

    @classmethod
    def of(
        cls,
        name: str,
        check: CheckLike,
        metadata: Optional[Mapping[str, str]] = None,
    ) -> "HealthCheck[Outcome]":
        """Report with a single check.

        `check` may be a status, an outcome, or a zero-argument callable
        returning a status (or an awaitable of one).
        """
        return cls((HealthCheckElement(name, as_outcome(check), metadata or {}),))

    @classmethod
    def ok(
        cls, name: str, metadata: Optional[Mapping[str, str]] = None
    ) -> "HealthCheck[Resolved]":
        return cls.of(name, HealthCheckStatus.ok(), metadata)

    @classmethod
    def failure(
        cls, name: str, error: str, metadata: Optional[Mapping[str, str]] = None
    ) -> "HealthCheck[Resolved]":
        return cls.of(name, HealthCheckStatus.failure(error), metadata)

    @classmethod
    def ok_with_resolved_metadata(
        cls, name: str, resolver: Callable[[str], str], *keys: str
    ) -> "HealthCheck[Resolved]":
        """
        Healthy check whose metadata holds every key `resolver` can resolve.

        Keys for which the resolver raises are left out.
        """
        metadata = {}
        for key in keys:
            try:
                metadata[key] = resolver(key)
            except Exception as exc:
                logger.debug("healthcheck.metadata.unresolved", key=key, error=str(exc))
        return cls.ok(name, metadata)

    @classmethod
    def from_elements(
        cls, elements: Iterable[HealthCheckElement[OutcomeT]]
    ) -> "HealthCheck[OutcomeT]":
        return cls(tuple(elements))

    # Combination

    def with_check(
        self,
        name: str,
        check: CheckLike,
        metadata: Optional[Mapping[str, str]] = None,
    ) -> "HealthCheck[Outcome]":
        """New report with one more check appended at the end."""
        element = HealthCheckElement(name, as_outcome(check), metadata or {})
        return HealthCheck(self.statuses + (element,))

    def with_checks(self, *elements: HealthCheckElement[Outcome]) -> "HealthCheck[Outcome]":
        """New report with `elements` appended in the given order."""
        return HealthCheck(self.statuses + tuple(elements))

    def extend(self, other: "HealthCheck[Outcome]") -> "HealthCheck[Outcome]":
        return HealthCheck(self.statuses + other.statuses)

    def transform(self, fn: Callable[[OutcomeT], TargetT]) -> "HealthCheck[TargetT]":
        """Apply `fn` to every outcome without evaluating anything."""
        return HealthCheck(tuple(element.transform(fn) for element in self.statuses))

    def lift(self) -> "HealthCheck[Outcome]":
        """Re-express every outcome as `Deferred`."""
        return self.transform(to_deferred)

    # Evaluation

    async def evaluate(self, concurrently: bool = True) -> "HealthCheck[Resolved]":
        """
        Run every check and return a report of resolved elements.

        Checks never abort their siblings: an exception raised by a check is
        recorded as that check's `Failure`. The result keeps the original
        order whether checks run concurrently or one after another.
        """
        elements: List[HealthCheckElement[Resolved]]
        if concurrently:
            elements = list(
                await asyncio.gather(*(_recover(element) for element in self.statuses))
            )
        else:
            elements = [await _recover(element) for element in self.statuses]

        resolved: HealthCheck[Resolved] = HealthCheck(tuple(elements))
        logger.debug(
            "healthcheck.evaluated",
            checks=len(resolved),
            failed=[e.name for e in resolved.statuses if e.result.is_failure],
        )
        return resolved

    async def fold(
        self,
        on_success: Callable[["HealthCheck[Resolved]"], R],
        on_failure: Callable[["HealthCheck[Resolved]"], R],
        concurrently: bool = True,
    ) -> R:
        """
        Evaluate and hand the resolved report to exactly one callback.

        `on_success` is called only when every check is `Ok`.
        """
        resolved = await self.evaluate(concurrently=concurrently)
        if resolved.is_ok:
            return on_success(resolved)
        return on_failure(resolved)

    # Accessors

    @property
    def is_resolved(self) -> bool:
        return all(isinstance(e.status, Resolved) for e in self.statuses)

    @property
    def is_ok(self) -> bool:
        """True when every element is resolved to `Ok`."""
        return all(e.result.is_ok for e in self.statuses)

    @property
    def names(self) -> List[str]:
        return [e.name for e in self.statuses]

    @property
    def head_name(self) -> str:
        return self.statuses[0].name

    @property
    def head_metadata(self) -> Mapping[str, str]:
        return self.statuses[0].metadata

    def __len__(self) -> int:
        return len(self.statuses)

    def __iter__(self) -> Iterator[HealthCheckElement[OutcomeT]]:
        return iter(self.statuses)
