"""Health check endpoint."""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from healthcheck.application.dtos.health_check_dto import HealthCheckDTO
from healthcheck.application.use_cases.health_check_use_cases import (
    EvaluateHealthCheckUseCase,
)
from healthcheck.domain.entities import DomainError
from healthcheck.shared import DEFAULT_HEALTHCHECK_PATH, get_logger

logger = get_logger(__name__)


def get_evaluate_health_check_use_case(request: Request) -> EvaluateHealthCheckUseCase:
    """Resolve the use case from the container owned by the serving app."""
    return request.app.state.container.evaluate_health_check_use_case()


async def healthcheck(
    evaluate_health_check_use_case: EvaluateHealthCheckUseCase = Depends(
        get_evaluate_health_check_use_case
    ),
) -> JSONResponse:
    """Evaluate every check; 200 when all are Ok, 503 otherwise."""
    try:
        result = await evaluate_health_check_use_case.execute()
    except DomainError as exc:
        logger.error("healthcheck.build.failure", error=exc.message, exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to build health check",
        ) from exc

    status_code = (
        status.HTTP_200_OK if result.healthy else status.HTTP_503_SERVICE_UNAVAILABLE
    )
    return JSONResponse(content=result.report.to_wire(), status_code=status_code)


def build_router(path: str = DEFAULT_HEALTHCHECK_PATH) -> APIRouter:
    """Router exposing `GET <path>`."""
    router = APIRouter(tags=["System"])
    router.add_api_route(
        path,
        healthcheck,
        methods=["GET"],
        response_model=HealthCheckDTO,
        responses={
            status.HTTP_503_SERVICE_UNAVAILABLE: {
                "model": HealthCheckDTO,
                "description": "At least one check failed",
            }
        },
    )
    return router
