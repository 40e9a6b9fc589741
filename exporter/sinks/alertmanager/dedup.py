"""Time-bounded records of recently forwarded alert fingerprints.

Both caches expose a single operation, ``admit``: look the fingerprint up and,
if it is absent or expired, record it with a fresh expiry. Only the caller
that records the fingerprint is admitted; every other caller inside the
window is told to suppress.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from typing import Callable, Protocol

import redis.asyncio as aioredis

from exporter.queue.redis_client import DEDUP_PREFIX

logger = logging.getLogger("exporter.sinks.alertmanager")

DEFAULT_WINDOW_SECONDS = 300
DEFAULT_MAX_ENTRIES = 500


class DedupCache(Protocol):
    async def admit(self, fingerprint: str) -> bool: ...


class MemoryDedupCache:
    """In-process cache with a fixed suppression window and a size cap.

    Entries are kept in insertion order. Since every entry lives for the same
    window, the oldest entry is always the first to expire, so expired
    entries are swept from the front on each call and the oldest live entry
    is evicted when the cap is exceeded.
    """

    def __init__(
        self,
        window_seconds: float = DEFAULT_WINDOW_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be positive")
        self._window = window_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._expiry: OrderedDict[str, float] = OrderedDict()
        self._lock = threading.Lock()

    async def admit(self, fingerprint: str) -> bool:
        with self._lock:
            now = self._clock()
            self._sweep(now)

            expires_at = self._expiry.get(fingerprint)
            if expires_at is not None and expires_at > now:
                return False

            self._expiry[fingerprint] = now + self._window
            self._expiry.move_to_end(fingerprint)
            while len(self._expiry) > self._max_entries:
                self._expiry.popitem(last=False)
            return True

    def _sweep(self, now: float) -> None:
        while self._expiry:
            oldest, expires_at = next(iter(self._expiry.items()))
            if expires_at > now:
                break
            del self._expiry[oldest]

    def __len__(self) -> int:
        return len(self._expiry)


class RedisDedupCache:
    """Cache shared by every replica pointed at the same Redis."""

    def __init__(
        self,
        redis: aioredis.Redis,
        window_seconds: int = DEFAULT_WINDOW_SECONDS,
        prefix: str = DEDUP_PREFIX,
    ) -> None:
        self._redis = redis
        self._window = window_seconds
        self._prefix = prefix

    async def admit(self, fingerprint: str) -> bool:
        first_seen = await self._redis.set(
            f"{self._prefix}{fingerprint}", "1",
            nx=True,
            ex=self._window,
        )
        return bool(first_seen)
