"""Bounded FIFO cache of detection results.

Entries are evicted in insertion order once ``max_size`` is reached. All
bookkeeping happens under one lock so concurrent callers cannot corrupt the
size accounting; a lost update only means a result is recomputed.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar

from ..core import DEFAULT_CACHE_SIZE

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class CacheInfo:
    """Snapshot of cache state for diagnostics."""
    size: int
    max_size: int
    hits: int
    misses: int

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return self.hits / total


class ResultCache(Generic[T]):
    """Insertion-ordered cache with a fixed capacity."""

    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE):
        if max_size < 1:
            raise ValueError(f"max_size must be >= 1, got {max_size}")
        self.max_size = max_size
        self._entries: Dict[str, T] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[T]:
        """Return the cached value or None on a miss."""
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self._misses += 1
            else:
                self._hits += 1
            return value

    def put(self, key: str, value: T) -> None:
        """Store a value, evicting the oldest entry when full."""
        with self._lock:
            if key in self._entries:
                self._entries[key] = value
                return
            if len(self._entries) >= self.max_size:
                oldest = next(iter(self._entries))
                del self._entries[oldest]
                logger.debug("Cache full (%d), evicted %r", self.max_size, oldest)
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: Any) -> bool:
        with self._lock:
            return key in self._entries

    def info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(
                size=len(self._entries),
                max_size=self.max_size,
                hits=self._hits,
                misses=self._misses,
            )
