from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Callable, Optional

import pytest

from pulsecheck.domain.ports.probe import Probe
from pulsecheck.domain.services.probe_registry import ProbeRegistry

FIXED_NOW = datetime(2024, 9, 9, 12, 0, 0, 123456, tzinfo=timezone.utc)


class FakeProbe(Probe):
    """Probe whose ping succeeds, raises or sleeps as configured."""

    def __init__(
        self,
        error: Optional[BaseException] = None,
        delay: float = 0.0,
    ) -> None:
        self.error = error
        self.delay = delay
        self.calls = 0
        self.cancelled = False

    async def ping(self) -> None:
        self.calls += 1
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self.error is not None:
            raise self.error


class HangingProbe(Probe):
    """Probe that ignores its own timeout by overriding ``run``."""

    def __init__(self, delay: float = 10.0) -> None:
        self.delay = delay

    async def ping(self) -> None:  # pragma: no cover - run is overridden
        return None

    async def run(self, timeout: float):  # type: ignore[override]
        await asyncio.sleep(self.delay)
        raise AssertionError("late result must be discarded")


def make_registry(**probes: Probe) -> ProbeRegistry:
    registry = ProbeRegistry()
    for name, probe in probes.items():
        registry.register(name, probe)
    return registry


@pytest.fixture()
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture()
def registry_factory() -> Callable[..., ProbeRegistry]:
    return make_registry


@pytest.fixture()
def fake_probe() -> type[FakeProbe]:
    return FakeProbe


@pytest.fixture()
def hanging_probe() -> type[HangingProbe]:
    return HangingProbe
