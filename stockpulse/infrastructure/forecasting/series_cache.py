"""
In-memory cache for resolved daily series.

Implements:
- Per-symbol entries with a fixed TTL (5 minutes by default)
- Capacity cap with FIFO eviction on overflow
- Thread-safe reads and writes

The cache is an explicit object injected into the series provider,
so tests and independent app instances never share state by accident.
"""

import logging
import threading
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Optional

from stockpulse.domain.forecasting.entities import Bar

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0
DEFAULT_MAX_ENTRIES = 100


@dataclass(frozen=True)
class CacheEntry:
    """A cached series and when it was resolved."""

    key: str
    series: tuple[Bar, ...]
    fetched_at: float


class SeriesCache:
    """TTL cache of daily series keyed by symbol.

    When an insert pushes the cache past `max_entries`, the entry that
    was inserted first is dropped (FIFO, not LRU). Re-setting an
    existing key keeps its original insertion position.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    @staticmethod
    def key_for(symbol: str) -> str:
        """Cache key for a normalized symbol."""
        return f"stock_{symbol}"

    def get(self, key: str) -> Optional[list[Bar]]:
        """Return a copy of the cached series, or None if absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.fetched_at >= self._ttl:
            return None
        return list(entry.series)

    def set(self, key: str, series: Iterable[Bar]) -> None:
        """Store a series under `key`, evicting one entry on overflow."""
        entry = CacheEntry(key=key, series=tuple(series), fetched_at=self._clock())
        with self._lock:
            self._entries[key] = entry
            if len(self._entries) > self._max_entries:
                oldest = next(iter(self._entries))
                del self._entries[oldest]
                logger.debug("Evicted series cache entry %s", oldest)

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    def keys(self) -> list[str]:
        """Keys in insertion order."""
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
