"""
Bounded response cache with per-entry TTL and insertion-order eviction.

Used twice: once for search results and once for peak-availability
lookups. Reads never refresh recency; when a put pushes the size past
capacity, the single oldest-inserted entry is evicted. Expired entries
are swept lazily on read, never by a background timer.

Usage:
    cache = TtlLruCache(max_entries=5, ttl_seconds=60)
    cache.put("k", value)
    cache.get("k")  # value, or None once 60s have passed
"""
import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Iterator, List, Optional, TypeVar

from inventory_search.core.constants.cache import CACHE_MAX_ENTRIES, CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


@dataclass
class CacheEntry(Generic[K, V]):
    key: K
    value: V
    expires_at: float


class TtlLruCache(Generic[K, V]):
    """
    Thread-safe TTL cache with FIFO-by-insertion eviction.

    Every mutation (put, remove, lazy TTL sweep) runs under one lock so a
    concurrent reader never observes a partially evicted state.
    """

    def __init__(
        self,
        max_entries: int = CACHE_MAX_ENTRIES,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        name: str = "cache",
    ):
        """
        Args:
            max_entries: Capacity; must be at least 1
            ttl_seconds: Lifetime of each entry, measured from its put
            clock: Monotonic time source in seconds (injectable for tests)
            name: Label used in log lines
        """
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._max_entries = max_entries
        self._ttl = ttl_seconds
        self._clock = clock
        self._name = name
        self._entries: "OrderedDict[K, CacheEntry[K, V]]" = OrderedDict()
        self._lock = threading.Lock()

    @property
    def max_entries(self) -> int:
        return self._max_entries

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def _is_expired(self, entry: CacheEntry[K, V], now: float) -> bool:
        return now >= entry.expires_at

    def get(self, key: K) -> Optional[V]:
        """Return the live value for ``key``, dropping it if its TTL elapsed."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._is_expired(entry, self._clock()):
                del self._entries[key]
                logger.debug(f"{self._name}: expired {key!r}")
                return None
            return entry.value

    def put(self, key: K, value: V) -> None:
        """Insert or overwrite ``key`` at the newest position."""
        with self._lock:
            # Overwrites re-enter at the newest position
            self._entries.pop(key, None)
            self._entries[key] = CacheEntry(key=key, value=value, expires_at=self._clock() + self._ttl)
            while len(self._entries) > self._max_entries:
                evicted_key, _ = self._entries.popitem(last=False)
                logger.info(f"{self._name}: evicted oldest entry {evicted_key!r}")

    def remove(self, key: K, expected: Any = _MISSING) -> bool:
        """
        Delete ``key``.

        When ``expected`` is given the entry is only removed if it still
        holds that exact object, so a late failure cannot drop a newer
        value stored under the same key.

        Returns:
            True if an entry was removed
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return False
            if expected is not _MISSING and entry.value is not expected:
                return False
            del self._entries[key]
            return True

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def keys(self) -> List[K]:
        """Live keys, oldest-inserted first."""
        with self._lock:
            now = self._clock()
            return [k for k, e in self._entries.items() if not self._is_expired(e, now)]

    def __contains__(self, key: object) -> bool:
        with self._lock:
            entry = self._entries.get(key)  # type: ignore[arg-type]
            return entry is not None and not self._is_expired(entry, self._clock())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())
