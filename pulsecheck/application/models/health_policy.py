"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HealthCheckPolicy:
    """Timeout budget, in seconds, applied to every health check."""

    per_probe_timeout: float = 2.0
    overall_timeout: float = 5.0

    def __post_init__(self) -> None:
        if self.per_probe_timeout <= 0 or self.overall_timeout <= 0:
            raise ValueError("Health check timeouts must be positive")
