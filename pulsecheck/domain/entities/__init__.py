"""Domain entities and errors for dependency health."""

from .errors import DomainError, DuplicateNameError, ProbeFailure
from .health import (
    HealthReport,
    OverallStatus,
    ProbeOutcome,
    ProbeStatus,
    describe_error,
    utc_now,
)

__all__ = [
    "DomainError",
    "DuplicateNameError",
    "ProbeFailure",
    "HealthReport",
    "OverallStatus",
    "ProbeOutcome",
    "ProbeStatus",
    "describe_error",
    "utc_now",
]
