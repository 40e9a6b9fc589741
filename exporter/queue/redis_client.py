"""Shared async Redis client for dedup state shared across exporter replicas."""

from __future__ import annotations

import redis.asyncio as aioredis

from exporter.config import settings

_pool: aioredis.Redis | None = None

DEDUP_PREFIX = "exporter:dedup:"


def get_redis() -> aioredis.Redis:
    global _pool
    if _pool is None:
        _pool = aioredis.from_url(
            settings.redis_url,
            decode_responses=True,
            max_connections=10,
        )
    return _pool


async def close_redis() -> None:
    global _pool
    if _pool is not None:
        await _pool.aclose()
        _pool = None
