"""Thread-safe in-memory TTL cache for upstream API responses.

Entries are checked lazily on read and removed physically by a periodic
sweep, so keys that are never read again do not accumulate.  One cache
instance is created per key-space at startup and shared by every request.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Default TTL in seconds
DEFAULT_TTL = 300.0


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    value: T
    expires_at: float

    def is_live(self, now: float) -> bool:
        return now < self.expires_at


class TTLCache(Generic[T]):
    """Key/value store with per-entry expiry.

    ``get`` never mutates state; expired entries are only dropped by
    ``sweep``.  The lock covers map access alone, callers fetch fresh data
    outside of it and store the result back with ``set``.
    """

    def __init__(
        self,
        default_ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry[T]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> tuple[T | None, bool]:
        """Return ``(value, True)`` for a live entry, ``(None, False)`` otherwise."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
        if entry is None or not entry.is_live(now):
            return None, False
        return entry.value, True

    def set(self, key: str, value: T, ttl: float | None = None) -> None:
        """Insert or overwrite ``key``; it stays visible for ``ttl`` seconds."""
        ttl = self.default_ttl if ttl is None else ttl
        entry = CacheEntry(value=value, expires_at=self._clock() + ttl)
        with self._lock:
            self._entries[key] = entry

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def delete_prefix(self, prefix: str) -> int:
        """Remove every entry whose key starts with ``prefix``, live or expired."""
        with self._lock:
            keys = [key for key in self._entries if key.startswith(prefix)]
            for key in keys:
                del self._entries[key]
        return len(keys)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def sweep(self) -> int:
        """Remove expired entries and return how many were removed."""
        with self._lock:
            snapshot = list(self._entries.items())

        now = self._clock()
        expired = [(key, entry) for key, entry in snapshot if not entry.is_live(now)]

        removed = 0
        for key, entry in expired:
            with self._lock:
                # Skip keys overwritten since the snapshot was taken
                if self._entries.get(key) is entry:
                    del self._entries[key]
                    removed += 1
        return removed

    def __len__(self) -> int:
        """Physical size, including expired entries not yet swept."""
        with self._lock:
            return len(self._entries)


async def run_sweeper(caches: list[TTLCache], interval: float) -> None:
    """Sweep ``caches`` every ``interval`` seconds until cancelled."""
    while True:
        await asyncio.sleep(interval)
        for cache in caches:
            try:
                removed = cache.sweep()
            except Exception:
                logger.exception("Cache sweep failed")
                continue
            if removed:
                logger.debug("Cache sweep removed %d expired entries", removed)
