"""Composite search-result cache with TTL and oldest-first eviction.

State lives in the instance (created empty), not in the module, so each
service or test owns its own cache. Reads and writes take one lock so an
eviction never interleaves with a lookup.
"""

import hashlib
import json
import logging
import threading
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from cachetools import FIFOCache

from jobsearch.core.config import CacheConfig
from jobsearch.core.schemas import AggregateResult

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheEntry:
    result: AggregateResult
    timestamp: float


def make_cache_key(skills: Iterable[str], location_names: Iterable[str]) -> str:
    """Canonical key: order of skills and locations does not matter."""
    canonical = json.dumps(
        {"skills": sorted(skills), "locations": sorted(location_names)},
        ensure_ascii=False,
        separators=(",", ":"),
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class SearchCache:
    """Bounded TTL cache of aggregate results.

    Usage::

        cache = SearchCache(CacheConfig(ttl_minutes=30, max_entries=50))
        hit = cache.get(key)
        if hit is None:
            cache.set(key, result)
    """

    def __init__(self, config: CacheConfig, clock: Clock = time.monotonic) -> None:
        self._ttl = config.ttl_seconds
        self._clock = clock
        # FIFO order == timestamp order: re-setting a key moves it to the end.
        self._entries: FIFOCache = FIFOCache(maxsize=config.max_entries)
        self._lock = threading.Lock()

    def get(self, key: str) -> AggregateResult | None:
        """Live result for ``key``, or None on miss, expiry or a bad entry."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if not isinstance(entry, CacheEntry):
                logger.warning("Dropping malformed cache entry for %s", key[:12])
                del self._entries[key]
                return None
            if self._clock() - entry.timestamp >= self._ttl:
                logger.debug("Cache entry expired for %s", key[:12])
                del self._entries[key]
                return None
            return entry.result

    def set(self, key: str, result: AggregateResult) -> None:
        """Store ``result``; evicts the oldest entry when over capacity."""
        with self._lock:
            self._entries[key] = CacheEntry(result=result, timestamp=self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
