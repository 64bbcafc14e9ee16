"""
Universal health check.

Aggregates independently defined health checks into a single report and
exposes it over HTTP with a status code reflecting the overall verdict.
"""

from healthcheck.domain.entities import (
    Blocking,
    Deferred,
    HealthCheck,
    HealthCheckElement,
    HealthCheckStatus,
    Resolved,
)

__all__ = [
    "Blocking",
    "Deferred",
    "HealthCheck",
    "HealthCheckElement",
    "HealthCheckStatus",
    "Resolved",
]
