"""
Health domain entities.

Value objects describing the result of probing one dependency and the
aggregated report for a single health check.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class ProbeStatus(str, Enum):
    """Classified result of running one probe."""

    OK = "ok"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


class OverallStatus(str, Enum):
    """Verdict for the whole process."""

    OK = "ok"
    DEGRADED = "degraded"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def describe_error(exc: BaseException) -> str:
    """Human readable reason for ``exc``; the class name if it has no message."""
    message = str(exc).strip()
    return message or type(exc).__name__


@dataclass(frozen=True, slots=True)
class ProbeOutcome:
    """Outcome of a single probe run. ``reason`` is only set for failures."""

    status: ProbeStatus
    reason: Optional[str] = None
    latency_ms: Optional[float] = None

    @classmethod
    def ok(cls, latency_ms: Optional[float] = None) -> "ProbeOutcome":
        return cls(status=ProbeStatus.OK, latency_ms=latency_ms)

    @classmethod
    def failed(cls, reason: str, latency_ms: Optional[float] = None) -> "ProbeOutcome":
        return cls(status=ProbeStatus.FAILED, reason=reason, latency_ms=latency_ms)

    @classmethod
    def timed_out(cls, latency_ms: Optional[float] = None) -> "ProbeOutcome":
        return cls(status=ProbeStatus.TIMED_OUT, latency_ms=latency_ms)

    @property
    def is_ok(self) -> bool:
        return self.status is ProbeStatus.OK


@dataclass(frozen=True, slots=True)
class HealthReport:
    """Aggregated outcomes of one health check.

    ``services`` keeps registry insertion order and is read-only.
    ``overall_status`` is derived: OK iff every outcome is OK.
    """

    timestamp: datetime
    services: Mapping[str, ProbeOutcome] = field(
        default_factory=lambda: MappingProxyType({})
    )
    overall_status: OverallStatus = field(init=False)

    def __post_init__(self) -> None:
        frozen = MappingProxyType(dict(self.services))
        if all(outcome.is_ok for outcome in frozen.values()):
            status = OverallStatus.OK
        else:
            status = OverallStatus.DEGRADED
        object.__setattr__(self, "services", frozen)
        object.__setattr__(self, "overall_status", status)

    @classmethod
    def from_outcomes(
        cls, timestamp: datetime, services: Mapping[str, ProbeOutcome]
    ) -> "HealthReport":
        return cls(timestamp=timestamp, services=services)

    @property
    def failing_services(self) -> list[str]:
        return [name for name, outcome in self.services.items() if not outcome.is_ok]
