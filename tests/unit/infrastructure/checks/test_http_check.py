from __future__ import annotations

import httpx
import pytest

from healthcheck.domain.entities import HealthCheck, HealthCheckStatus
from healthcheck.infrastructure.checks import http_check


class _Response:
    def __init__(self, status_code: int):
        self.status_code = status_code


class _Client:
    def __init__(self, outcome):
        self._outcome = outcome
        self.urls: list[str] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None

    async def get(self, url):
        self.urls.append(url)
        if isinstance(self._outcome, Exception):
            raise self._outcome
        return _Response(self._outcome)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status_code", "expected"),
    [
        (200, HealthCheckStatus.ok()),
        (404, HealthCheckStatus.ok()),
        (503, HealthCheckStatus.failure("HTTP 503")),
    ],
)
async def test_http_check_maps_status_codes(monkeypatch, status_code, expected) -> None:
    client = _Client(status_code)
    monkeypatch.setattr("httpx.AsyncClient", lambda timeout: client)

    element = http_check("orion", "http://orion:1026/version")
    resolved = await HealthCheck((element,)).evaluate()

    assert client.urls == ["http://orion:1026/version"]
    assert resolved.statuses[0].result == expected
    assert dict(resolved.head_metadata) == {"url": "http://orion:1026/version"}


@pytest.mark.asyncio
async def test_http_check_transport_error_becomes_failure(monkeypatch) -> None:
    error = httpx.ConnectError("connection refused")
    monkeypatch.setattr("httpx.AsyncClient", lambda timeout: _Client(error))

    resolved = await HealthCheck((http_check("iot", "http://iot"),)).evaluate()

    assert resolved.statuses[0].result == HealthCheckStatus.failure("connection refused")
