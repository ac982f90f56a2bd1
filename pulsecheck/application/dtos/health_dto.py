"""DTO and mapper for the /health response payload."""

from __future__ import annotations

from typing import Any, Dict, Literal, Tuple

from pydantic import BaseModel, Field

from pulsecheck.domain.entities.health import (
    HealthReport,
    OverallStatus,
    ProbeOutcome,
    ProbeStatus,
)
from pulsecheck.shared.consts import SERVICE_ERROR_PREFIX, TIMEOUT_REASON

HTTP_OK = 200
HTTP_SERVICE_UNAVAILABLE = 503


class HealthResponseDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: Literal["ok", "error"] = Field(description="Overall process status")
    timestamp: str = Field(description="ISO-8601 start time of the check")
    services: Dict[str, str] = Field(
        default_factory=dict,
        description="Per dependency status: 'ok' or 'error: <reason>'",
    )

    @classmethod
    def from_domain(cls, report: HealthReport) -> "HealthResponseDTO":
        return cls(
            status="ok" if report.overall_status is OverallStatus.OK else "error",
            timestamp=report.timestamp.isoformat(timespec="seconds"),
            services={
                name: describe_outcome(outcome)
                for name, outcome in report.services.items()
            },
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "error",
                "timestamp": "2024-09-09T12:00:00+00:00",
                "services": {
                    "database": "ok",
                    "cache": "error: connection refused",
                },
            }
        }
    }


def describe_outcome(outcome: ProbeOutcome) -> str:
    if outcome.status is ProbeStatus.OK:
        return "ok"
    if outcome.status is ProbeStatus.TIMED_OUT:
        return f"{SERVICE_ERROR_PREFIX}{TIMEOUT_REASON}"
    return f"{SERVICE_ERROR_PREFIX}{outcome.reason or 'unknown'}"


class ResponseMapper:
    """Pure mapping from a :class:`HealthReport` to status code and payload."""

    @staticmethod
    def status_code(report: HealthReport) -> int:
        if report.overall_status is OverallStatus.OK:
            return HTTP_OK
        return HTTP_SERVICE_UNAVAILABLE

    @classmethod
    def to_response(cls, report: HealthReport) -> Tuple[int, Dict[str, Any]]:
        payload = HealthResponseDTO.from_domain(report).model_dump()
        return cls.status_code(report), payload
