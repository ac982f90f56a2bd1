"""Liveness probe for the cache store."""

from __future__ import annotations

from pulsecheck.domain.entities.errors import ProbeFailure
from pulsecheck.domain.ports.clients import CacheClient
from pulsecheck.domain.ports.probe import Probe


class CacheProbe(Probe):
    """Send PING to the cache."""

    def __init__(self, cache: CacheClient) -> None:
        self._cache = cache

    async def ping(self) -> None:
        if not await self._cache.ping():
            raise ProbeFailure("unexpected PING reply")
