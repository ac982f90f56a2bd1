"""Use case for the health endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from pulsecheck.application.dtos.health_dto import ResponseMapper, describe_outcome
from pulsecheck.application.models import HealthCheckPolicy
from pulsecheck.domain.entities.health import OverallStatus
from pulsecheck.domain.services import HealthAggregator, ProbeRegistry
from pulsecheck.shared import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class HealthResponse:
    """Status code and JSON-ready payload for the /health endpoint."""

    status_code: int
    payload: Dict[str, Any]


class GetHealthStatusUseCase:
    """Use case responsible for returning health status."""

    def __init__(
        self,
        registry: ProbeRegistry,
        aggregator: HealthAggregator,
        policy: HealthCheckPolicy,
        mapper: ResponseMapper | None = None,
    ) -> None:
        self._registry = registry
        self._aggregator = aggregator
        self._policy = policy
        self._mapper = mapper or ResponseMapper()

    async def execute(self) -> HealthResponse:
        report = await self._aggregator.check(
            self._registry,
            per_probe_timeout=self._policy.per_probe_timeout,
            overall_timeout=self._policy.overall_timeout,
        )

        for name, outcome in report.services.items():
            if not outcome.is_ok:
                logger.warning(
                    "health.probe.degraded",
                    service=name,
                    outcome=outcome.status.value,
                    detail=describe_outcome(outcome),
                    latency_ms=outcome.latency_ms,
                )

        log = logger.info if report.overall_status is OverallStatus.OK else logger.warning
        log(
            "health.check.completed",
            status=report.overall_status.value,
            probes=len(report.services),
            failing=report.failing_services,
        )

        status_code, payload = self._mapper.to_response(report)
        return HealthResponse(status_code=status_code, payload=payload)
