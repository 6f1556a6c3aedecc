"""
In‑memory TTL cache for derived upstream data.

Entries expire individually after their time‑to‑live and the cache
holds at most ``max_entries`` items; when full, the least recently used
entry is displaced.  Reads refresh recency.

The cache is fail‑open: a fault while reading is logged and reported
as a miss, and a fault while writing is logged and otherwise ignored.
Callers therefore treat ``None`` from :meth:`TTLCache.get` as "go to
the source" without distinguishing why.  Cached values are never
``None``.

There is no locking.  Values are idempotent derived data, so when two
coroutines populate the same key the last write simply wins.
"""

import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


def cache_key(kind: str, *params: int, variant: Optional[bool] = None) -> str:
    """Build a deterministic cache key.

    >>> cache_key("window", 30, 0)
    'window-30-0'
    >>> cache_key("detail", 25, variant=True)
    'detail-25-true'
    """
    parts = [kind, *(str(int(param)) for param in params)]
    if variant is not None:
        parts.append("true" if variant else "false")
    return "-".join(parts)


@dataclass
class CacheEntry:
    key: str
    value: Any
    expires_at: float


class TTLCache:
    """Bounded key/value store with per‑entry expiry."""

    def __init__(
        self,
        max_entries: int = 50,
        default_ttl: float = 24 * 60 * 60,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value for ``key`` or ``None`` on a miss."""
        try:
            return self._get(key)
        except Exception:
            logger.warning("Cache read failed for %s; treating as miss", key, exc_info=True)
            return None

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds (default TTL if omitted)."""
        if value is None:
            return
        try:
            self._set(key, value, self.default_ttl if ttl is None else ttl)
        except Exception:
            logger.warning("Cache write failed for %s; value not cached", key, exc_info=True)

    def clear(self) -> None:
        self._entries.clear()

    def _get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._entries[key]
            logger.debug("Cache entry %s expired", key)
            return None
        self._entries.move_to_end(key)
        return entry.value

    def _set(self, key: str, value: Any, ttl: float) -> None:
        if ttl <= 0:
            return
        self._entries[key] = CacheEntry(key=key, value=value, expires_at=self._clock() + ttl)
        self._entries.move_to_end(key)
        self._evict()

    def _evict(self) -> None:
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if entry.expires_at <= now]
        for key in expired:
            del self._entries[key]
        while len(self._entries) > self.max_entries:
            displaced, _ = self._entries.popitem(last=False)
            logger.debug("Cache full; displaced %s", displaced)
