"""
Health check status.

A status has exactly two shapes: `Ok`, or `Failure` with a non-empty error
message. Statuses are immutable values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, ClassVar, Optional, Union

from healthcheck.domain.entities.errors import InvalidHealthCheckError

ErrorMessage = Union[str, Callable[[], str]]


class HealthCheckStatus:
    """Outcome of a single check: `Ok` or `Failure(error)`."""

    __slots__ = ()

    is_ok: ClassVar[bool]

    @property
    def is_failure(self) -> bool:
        return not self.is_ok

    @staticmethod
    def ok() -> "Ok":
        return OK

    @staticmethod
    def failure(error: str, cause: Optional[BaseException] = None) -> "Failure":
        return Failure(error=error, cause=cause)

    @staticmethod
    def of(is_ok: bool, error: ErrorMessage) -> "HealthCheckStatus":
        """
        `Ok` when `is_ok` holds, otherwise `Failure(error)`.

        `error` may be a zero-argument callable; it is only called when the
        check failed.
        """
        if is_ok:
            return OK
        return Failure(error=error() if callable(error) else error)

    @staticmethod
    def from_result(
        result: Union[bool, BaseException], error: ErrorMessage
    ) -> "HealthCheckStatus":
        """
        Map a boolean check result or the exception it raised to a status.

        An exception becomes a failure carrying its own message, `False`
        becomes `Failure(error)` and `True` becomes `Ok`.
        """
        if isinstance(result, BaseException):
            return HealthCheckStatus.from_exception(result)
        return HealthCheckStatus.of(bool(result), error)

    @staticmethod
    def from_exception(exc: BaseException) -> "Failure":
        return Failure(error=str(exc) or type(exc).__name__, cause=exc)


@dataclass(frozen=True, slots=True)
class Ok(HealthCheckStatus):
    is_ok: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class Failure(HealthCheckStatus):
    is_ok: ClassVar[bool] = False

    error: str
    # Original exception, if any. Never serialized.
    cause: Optional[BaseException] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.error, str) or not self.error:
            raise InvalidHealthCheckError(
                "Failure status requires a non-empty error message",
                details={"error": self.error},
            )


OK = Ok()
