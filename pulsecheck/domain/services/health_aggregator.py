"""Concurrent execution of registered probes and status aggregation."""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Callable, Dict

from pulsecheck.domain.entities.health import (
    HealthReport,
    ProbeOutcome,
    describe_error,
    utc_now,
)
from pulsecheck.domain.services.probe_registry import ProbeRegistry


class HealthAggregator:
    """Run every probe of a registry and merge the outcomes into a report.

    Holds no per-check state; one instance serves concurrent callers.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock

    async def check(
        self,
        registry: ProbeRegistry,
        per_probe_timeout: float,
        overall_timeout: float,
    ) -> HealthReport:
        """
        Probe all dependencies concurrently.

        Each probe is bounded by ``per_probe_timeout``. Probes still running
        once ``overall_timeout`` elapses are cancelled without being awaited
        and reported as timed out, so the call returns within
        ``overall_timeout`` whatever the probes do.
        """
        if per_probe_timeout <= 0 or overall_timeout <= 0:
            raise ValueError("Health check timeouts must be positive")

        timestamp = self._clock()
        entries = registry.list()
        if not entries:
            return HealthReport.from_outcomes(timestamp, {})

        tasks = {
            name: asyncio.create_task(
                probe.run(per_probe_timeout), name=f"health-probe:{name}"
            )
            for name, probe in entries
        }

        _, pending = await asyncio.wait(tasks.values(), timeout=overall_timeout)
        for task in pending:
            task.cancel()

        services: Dict[str, ProbeOutcome] = {}
        for name, task in tasks.items():
            services[name] = self._collect(task, pending)

        return HealthReport.from_outcomes(timestamp, services)

    @staticmethod
    def _collect(task: "asyncio.Task[ProbeOutcome]", pending: set) -> ProbeOutcome:
        if task in pending or task.cancelled():
            return ProbeOutcome.timed_out()
        exc = task.exception()
        if exc is not None:
            # Probe.run converts failures itself; this covers probes that don't.
            return ProbeOutcome.failed(describe_error(exc))
        return task.result()
