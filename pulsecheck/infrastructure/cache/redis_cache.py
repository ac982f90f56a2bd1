"""
Redis Cache - Infrastructure Layer

Async Redis client used by the cache probe.
"""

from __future__ import annotations

from typing import Optional

import redis.asyncio as aioredis


class RedisCache:
    """Redis key-value store client."""

    def __init__(self, redis_url: str, socket_timeout: Optional[float] = None) -> None:
        self._redis_url = redis_url
        self.client: aioredis.Redis = aioredis.from_url(
            redis_url,
            socket_connect_timeout=socket_timeout,
            socket_timeout=socket_timeout,
        )

    async def ping(self) -> bool:
        return bool(await self.client.ping())

    async def close(self) -> None:
        await self.client.aclose()
