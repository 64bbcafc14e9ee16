"""HTTP dependency check."""

from __future__ import annotations

from time import perf_counter

import httpx

from healthcheck.domain.entities import Deferred, HealthCheckElement, HealthCheckStatus
from healthcheck.shared import get_logger

logger = get_logger(__name__)


def http_check(
    name: str, url: str, *, timeout: float = 5.0
) -> HealthCheckElement[Deferred]:
    """
    GET `url` and treat any non-5xx answer as healthy.

    Transport errors (connection refused, timeouts) propagate and are turned
    into a failure by the report evaluation.
    """

    async def _check() -> HealthCheckStatus:
        start = perf_counter()
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.get(url)

        latency_ms = (perf_counter() - start) * 1000
        logger.debug(
            "healthcheck.http.response",
            check=name,
            url=url,
            status_code=response.status_code,
            latency_ms=latency_ms,
        )
        return HealthCheckStatus.of(
            response.status_code < 500, lambda: f"HTTP {response.status_code}"
        )

    return HealthCheckElement(name, Deferred(_check), {"url": url})
