"""Use case for evaluating the health check report."""

from typing import Callable

from healthcheck.application.dtos.health_check_dto import (
    FailureStatusDTO,
    HealthCheckDTO,
    HealthCheckResultDTO,
)
from healthcheck.domain.entities import HealthCheck, Outcome, Resolved
from healthcheck.shared import get_logger

logger = get_logger(__name__)

CheckFactory = Callable[[], HealthCheck[Outcome]]


class EvaluateHealthCheckUseCase:
    """Build a fresh report, evaluate it and return the verdict."""

    def __init__(self, check_factory: CheckFactory) -> None:
        self._check_factory = check_factory

    async def execute(self) -> HealthCheckResultDTO:
        health_check = self._check_factory()
        result = await health_check.fold(self._healthy, self._unhealthy)
        if not result.healthy:
            logger.warning(
                "healthcheck.unhealthy",
                failed=[
                    element.name
                    for element in result.report.statuses
                    if isinstance(element.status, FailureStatusDTO)
                ],
            )
        return result

    @staticmethod
    def _healthy(report: HealthCheck[Resolved]) -> HealthCheckResultDTO:
        return HealthCheckResultDTO(healthy=True, report=HealthCheckDTO.from_domain(report))

    @staticmethod
    def _unhealthy(report: HealthCheck[Resolved]) -> HealthCheckResultDTO:
        return HealthCheckResultDTO(
            healthy=False, report=HealthCheckDTO.from_domain(report)
        )
