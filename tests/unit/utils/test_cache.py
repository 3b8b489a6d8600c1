"""Tests for the response cache."""

import pytest

from netsuite_sdk.utils.cache import ResponseCache, create_cache_key


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


class TestResponseCache:
    @pytest.mark.unit
    def test_set_and_get(self):
        cache = ResponseCache()
        cache.set("k", {"id": 1}, ttl=60)

        assert cache.get("k") == {"id": 1}
        assert len(cache) == 1

    @pytest.mark.unit
    def test_missing_key(self):
        assert ResponseCache().get("missing") is None

    @pytest.mark.unit
    def test_expiry(self):
        clock = FakeClock()
        cache = ResponseCache(clock=clock)
        cache.set("k", "v", ttl=5)

        clock.now = 105.0
        assert cache.get("k") == "v"

        clock.now = 105.1
        assert cache.get("k") is None
        assert len(cache) == 0

    @pytest.mark.unit
    def test_delete_and_clear(self):
        cache = ResponseCache()
        cache.set("a", 1, ttl=60)
        cache.set("b", 2, ttl=60)

        assert cache.delete("a") is True
        assert cache.delete("a") is False

        cache.clear()
        assert len(cache) == 0


class TestCreateCacheKey:
    @pytest.mark.unit
    def test_method_and_url(self):
        assert create_cache_key("https://x/customer/1", "get") == "GET:https://x/customer/1"

    @pytest.mark.unit
    def test_params_are_order_independent(self):
        first = create_cache_key("https://x", "GET", {"b": 2, "a": 1})
        second = create_cache_key("https://x", "GET", {"a": 1, "b": 2})

        assert first == second
        assert first == 'GET:https://x:{"a": 1, "b": 2}'
