# pagebuilder/catalog/cache.py
import time
from typing import Any, Callable, Dict, NamedTuple, Optional, TypeVar

T = TypeVar("T")


class CacheEntry(NamedTuple):
    value: Any
    expires_at: float


class CatalogCache:
    """
    TTL memoization for catalog lookups.

    One instance per process. The map is shared and unsynchronized: two
    concurrent misses on the same key both fetch and the last write wins.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def with_cache(self, key: str, ttl_seconds: float, fetch: Callable[[], T]) -> T:
        entry = self._entries.get(key)
        if entry is not None and entry.expires_at > self._clock():
            return entry.value

        value = fetch()
        self._entries[key] = CacheEntry(value, self._clock() + ttl_seconds)
        return value

    def clear(self, pattern: Optional[str] = None) -> int:
        """Drop every entry, or only those whose key contains `pattern`."""
        if not pattern:
            removed = len(self._entries)
            self._entries.clear()
            return removed

        keys = [key for key in self._entries if pattern in key]
        for key in keys:
            del self._entries[key]
        return len(keys)

    def __len__(self) -> int:
        return len(self._entries)
