"""Liveness probe for the relational database."""

from __future__ import annotations

import asyncio

from pulsecheck.domain.ports.clients import DatabaseClient
from pulsecheck.domain.ports.probe import Probe


class DatabaseProbe(Probe):
    """Verify a database connection can be acquired and used.

    The client is synchronous, so the check runs in a worker thread. On
    timeout the thread is left to finish on its own.
    """

    def __init__(self, database: DatabaseClient) -> None:
        self._database = database

    async def ping(self) -> None:
        await asyncio.to_thread(self._database.verify_connectivity)
