"""Probe abstraction: one liveness check against one dependency."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from time import perf_counter

from pulsecheck.domain.entities.health import ProbeOutcome, describe_error


class Probe(ABC):
    """Base class for dependency probes.

    Subclasses implement :meth:`ping` with the cheapest read-only operation
    that proves the dependency is alive, raising on any failure.
    :meth:`run` turns that into a :class:`ProbeOutcome` and never raises.
    """

    @abstractmethod
    async def ping(self) -> None:
        """Perform the liveness operation; raise if the dependency is unhealthy."""

    async def run(self, timeout: float) -> ProbeOutcome:
        start = perf_counter()
        deadline = asyncio.timeout(timeout)
        try:
            async with deadline:
                await self.ping()
        except TimeoutError as exc:
            # Only our own deadline counts as a timeout; driver timeouts are failures.
            if deadline.expired():
                return ProbeOutcome.timed_out(latency_ms=_elapsed_ms(start))
            return ProbeOutcome.failed(describe_error(exc), latency_ms=_elapsed_ms(start))
        except Exception as exc:
            return ProbeOutcome.failed(describe_error(exc), latency_ms=_elapsed_ms(start))
        return ProbeOutcome.ok(latency_ms=_elapsed_ms(start))


def _elapsed_ms(start: float) -> float:
    return round((perf_counter() - start) * 1000, 3)
