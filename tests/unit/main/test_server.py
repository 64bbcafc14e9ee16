from __future__ import annotations

from fastapi import FastAPI

from healthcheck.domain.entities import HealthCheck
from healthcheck.main.config import AppSettings, ServerSettings
from healthcheck.main.server import serve


def test_serve_runs_uvicorn_with_configured_address(monkeypatch) -> None:
    calls: dict = {}

    def _run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr("healthcheck.main.server.uvicorn.run", _run)

    settings = AppSettings(server=ServerSettings(host="127.0.0.1", port=9000))
    serve(lambda: HealthCheck.ok("service"), settings)

    assert isinstance(calls["app"], FastAPI)
    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 9000
