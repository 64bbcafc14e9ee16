"""Domain entities package."""

from .check import HealthCheck, HealthCheckElement
from .errors import DomainError, EmptyHealthCheckError, InvalidHealthCheckError
from .outcomes import Blocking, Deferred, Outcome, Resolved, as_outcome, to_deferred
from .status import OK, Failure, HealthCheckStatus, Ok

__all__ = [
    "Blocking",
    "Deferred",
    "DomainError",
    "EmptyHealthCheckError",
    "Failure",
    "HealthCheck",
    "HealthCheckElement",
    "HealthCheckStatus",
    "InvalidHealthCheckError",
    "OK",
    "Ok",
    "Outcome",
    "Resolved",
    "as_outcome",
    "to_deferred",
]
