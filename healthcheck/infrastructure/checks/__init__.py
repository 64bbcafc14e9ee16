"""
Check builders.

Each builder returns a `HealthCheckElement` that can be appended to a report
with `HealthCheck.with_checks`. Builders take plain callables for the
dependency they probe, so no database or broker driver is required here.
"""

from .dependency_checks import (
    BrokerSend,
    broker_check,
    database_check,
    process_check,
)
from .http_check import http_check

__all__ = [
    "BrokerSend",
    "broker_check",
    "database_check",
    "http_check",
    "process_check",
]
