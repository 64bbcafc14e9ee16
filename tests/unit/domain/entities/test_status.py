from __future__ import annotations

import pytest

from healthcheck.domain.entities import (
    OK,
    Failure,
    HealthCheckStatus,
    InvalidHealthCheckError,
    Ok,
)


def test_ok_is_singleton() -> None:
    assert HealthCheckStatus.ok() is OK
    assert OK.is_ok is True
    assert OK.is_failure is False


def test_failure_requires_message() -> None:
    with pytest.raises(InvalidHealthCheckError):
        HealthCheckStatus.failure("")


def test_failure_equality_ignores_cause() -> None:
    first = HealthCheckStatus.failure("down", cause=RuntimeError("down"))
    second = HealthCheckStatus.failure("down")
    assert first == second
    assert first.is_failure is True


def test_of_evaluates_error_lazily() -> None:
    calls: list[int] = []

    def _reason() -> str:
        calls.append(1)
        return "expensive reason"

    assert HealthCheckStatus.of(True, _reason) is OK
    assert calls == []

    status = HealthCheckStatus.of(False, _reason)
    assert status == Failure("expensive reason")
    assert calls == [1]


@pytest.mark.parametrize(
    ("result", "expected"),
    [
        (True, OK),
        (False, Failure("check returned false")),
        (ValueError("connection refused"), Failure("connection refused")),
    ],
)
def test_from_result(result, expected) -> None:
    assert HealthCheckStatus.from_result(result, "check returned false") == expected


def test_from_exception_keeps_cause_and_falls_back_to_type_name() -> None:
    error = TimeoutError()
    status = HealthCheckStatus.from_exception(error)
    assert status.error == "TimeoutError"
    assert status.cause is error


def test_statuses_are_immutable() -> None:
    status = HealthCheckStatus.failure("down")
    with pytest.raises(AttributeError):
        status.error = "up"  # type: ignore[misc]
    assert isinstance(OK, Ok)
