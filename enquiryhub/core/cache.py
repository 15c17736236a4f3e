"""
In-process query cache for enquiry reads.
Writers call invalidate() so every reader refetches on its next load.
"""
import logging
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

from enquiryhub.config import settings

logger = logging.getLogger(__name__)

ENQUIRIES_CACHE_PREFIX = "enquiries"

InvalidationListener = Callable[[str], None]


def make_cache_key(prefix: str, *parts: Any) -> str:
    """Build a cache key such as 'enquiries:company:acme'."""
    return ":".join([prefix, *(str(part) for part in parts)])


class QueryCache:
    """TTL cache with prefix invalidation and invalidation listeners."""

    def __init__(self, ttl_seconds: int = 60):
        self.ttl_seconds = ttl_seconds
        self._entries: Dict[str, Tuple[float, Any]] = {}
        self._listeners: List[InvalidationListener] = []

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            logger.debug(f"Cache MISS for {key}")
            return None

        expires_at, value = entry
        if expires_at < time.monotonic():
            del self._entries[key]
            logger.debug(f"Cache EXPIRED for {key}")
            return None

        logger.debug(f"Cache HIT for {key}")
        return value

    def set(self, key: str, value: Any) -> None:
        now = time.monotonic()
        self._sweep_expired(now)
        self._entries[key] = (now + self.ttl_seconds, value)

    def _sweep_expired(self, now: float) -> None:
        expired = [key for key, (expires_at, _) in self._entries.items() if expires_at < now]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug(f"Swept {len(expired)} expired cache entries")

    def invalidate(self, prefix: str) -> int:
        """Drop every key starting with prefix and notify listeners."""
        stale = [key for key in self._entries if key.startswith(prefix)]
        for key in stale:
            del self._entries[key]

        logger.info(f"Invalidated {len(stale)} cache entries for '{prefix}'")
        for listener in list(self._listeners):
            listener(prefix)
        return len(stale)

    def subscribe(self, listener: InvalidationListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


# Process-wide cache
_query_cache: QueryCache = None


def get_query_cache() -> QueryCache:
    """Get the process-wide query cache."""
    global _query_cache
    if _query_cache is None:
        _query_cache = QueryCache(ttl_seconds=settings.ENQUIRY_CACHE_TTL_SECONDS)
    return _query_cache


def set_query_cache(cache: QueryCache) -> None:
    """Replace the process-wide cache (for testing)."""
    global _query_cache
    _query_cache = cache
