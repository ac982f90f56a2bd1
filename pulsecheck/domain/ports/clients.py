"""Client interfaces the probes depend on."""

from __future__ import annotations

from typing import Protocol


class DatabaseClient(Protocol):
    """Relational store able to prove a connection can be used."""

    def verify_connectivity(self) -> None:
        """Acquire a connection and run a trivial statement; raise on failure."""
        ...


class CacheClient(Protocol):
    """Key-value store answering PING."""

    async def ping(self) -> bool:
        ...
