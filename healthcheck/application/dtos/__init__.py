"""DTO package."""

from .health_check_dto import (
    FailureDetailDTO,
    FailureStatusDTO,
    HealthCheckDTO,
    HealthCheckElementDTO,
    HealthCheckResultDTO,
    OkStatusDTO,
)

__all__ = [
    "FailureDetailDTO",
    "FailureStatusDTO",
    "HealthCheckDTO",
    "HealthCheckElementDTO",
    "HealthCheckResultDTO",
    "OkStatusDTO",
]
