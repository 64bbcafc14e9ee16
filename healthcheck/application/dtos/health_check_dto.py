"""DTOs for the health check response payload.

Field declaration order is the wire order: `name`, `status`, `metadata` for
each element, and elements in report order.
"""

from __future__ import annotations

from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field

from healthcheck.domain.entities import (
    HealthCheck,
    HealthCheckElement,
    HealthCheckStatus,
    Resolved,
)


class OkStatusDTO(BaseModel):
    """Serialized as `{"Ok": {}}`."""

    ok: Dict[str, Any] = Field(default_factory=dict, serialization_alias="Ok")


class FailureDetailDTO(BaseModel):
    error: str = Field(description="Reason the check failed")


class FailureStatusDTO(BaseModel):
    """Serialized as `{"Failure": {"error": "..."}}`."""

    failure: FailureDetailDTO = Field(serialization_alias="Failure")


StatusDTO = Union[OkStatusDTO, FailureStatusDTO]


def status_to_dto(status: HealthCheckStatus) -> StatusDTO:
    if status.is_ok:
        return OkStatusDTO()
    return FailureStatusDTO(failure=FailureDetailDTO(error=status.error))


class HealthCheckElementDTO(BaseModel):
    """Serializable representation of one evaluated check."""

    name: str = Field(description="Check name")
    status: StatusDTO = Field(description="Check outcome")
    metadata: Dict[str, str] = Field(
        default_factory=dict, description="Additional check information"
    )

    @classmethod
    def from_domain(
        cls, element: HealthCheckElement[Resolved]
    ) -> "HealthCheckElementDTO":
        return cls(
            name=element.name,
            status=status_to_dto(element.result),
            metadata=dict(element.metadata),
        )


class HealthCheckDTO(BaseModel):
    """DTO representing the /healthcheck response payload."""

    statuses: List[HealthCheckElementDTO] = Field(
        description="Evaluated checks in the order they were registered"
    )

    @classmethod
    def from_domain(cls, health_check: HealthCheck[Resolved]) -> "HealthCheckDTO":
        return cls(
            statuses=[
                HealthCheckElementDTO.from_domain(element)
                for element in health_check.statuses
            ]
        )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    model_config = {
        "json_schema_extra": {
            "example": {
                "statuses": [
                    {
                        "name": "Database",
                        "status": {"Ok": {}},
                        "metadata": {},
                    },
                    {
                        "name": "MessageBroker",
                        "status": {"Failure": {"error": "Connection refused"}},
                        "metadata": {"topic": "health-check"},
                    },
                ]
            }
        }
    }


class HealthCheckResultDTO(BaseModel):
    """Verdict of one evaluation together with the evaluated report."""

    healthy: bool = Field(description="True when every check is Ok")
    report: HealthCheckDTO
