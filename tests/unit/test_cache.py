"""Tests for the query cache and its invalidation signal."""

from unittest.mock import patch

from enquiryhub.core.cache import (
    QueryCache,
    get_query_cache,
    make_cache_key,
    set_query_cache,
)


class TestQueryCache:
    """Tests for QueryCache."""

    def test_make_cache_key(self):
        assert make_cache_key("enquiries", "company:acme") == "enquiries:company:acme"

    def test_get_returns_stored_value(self, query_cache):
        query_cache.set("enquiries:company:acme", [{"id": "1"}])
        assert query_cache.get("enquiries:company:acme") == [{"id": "1"}]

    def test_get_missing_key(self, query_cache):
        assert query_cache.get("enquiries:company:nobody") is None

    def test_expired_entry_is_dropped(self):
        """Entries older than the TTL are treated as missing."""
        cache = QueryCache(ttl_seconds=10)
        with patch("enquiryhub.core.cache.time.monotonic", return_value=100.0):
            cache.set("k", "v")
        with patch("enquiryhub.core.cache.time.monotonic", return_value=111.0):
            assert cache.get("k") is None

    def test_set_sweeps_expired_entries(self):
        """Writing a key drops entries that expired and were never read again."""
        cache = QueryCache(ttl_seconds=10)
        with patch("enquiryhub.core.cache.time.monotonic", return_value=100.0):
            cache.set("enquiries:company:old", [])
        with patch("enquiryhub.core.cache.time.monotonic", return_value=111.0):
            cache.set("enquiries:company:new", [])

        assert "enquiries:company:old" not in cache._entries
        assert list(cache._entries) == ["enquiries:company:new"]

    def test_invalidate_by_prefix(self, query_cache):
        """Only keys under the prefix are dropped."""
        query_cache.set("enquiries:company:acme", [])
        query_cache.set("enquiries:customer:jo@example.com", [])
        query_cache.set("profiles:acme", {})

        removed = query_cache.invalidate("enquiries")

        assert removed == 2
        assert query_cache.get("enquiries:company:acme") is None
        assert query_cache.get("profiles:acme") == {}

    def test_listeners_notified(self, query_cache):
        """Subscribers hear every invalidation, until they unsubscribe."""
        heard = []
        unsubscribe = query_cache.subscribe(heard.append)

        query_cache.invalidate("enquiries")
        unsubscribe()
        query_cache.invalidate("enquiries")

        assert heard == ["enquiries"]

    def test_process_wide_cache_can_be_replaced(self):
        original = get_query_cache()
        replacement = QueryCache(ttl_seconds=1)
        try:
            set_query_cache(replacement)
            assert get_query_cache() is replacement
        finally:
            set_query_cache(original)
