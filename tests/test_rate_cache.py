"""
Rate Cache Tests - Unit Tests for the Single-entry TTL Cache

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- zecrate.application.rate_cache (RateCache)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from zecrate.application.rate_cache import CACHE_KEY, RateCache


class TestRateCache:
    def setup_method(self):
        self.now = 100.0
        self.cache = RateCache(ttl_seconds=60, clock=lambda: self.now)

    def test_empty_cache(self):
        assert self.cache.get() is None
        assert self.cache.size == 0
        assert self.cache.age_seconds() is None

    def test_fresh_entry(self):
        self.cache.set(2000.0)
        self.now += 30
        assert self.cache.get() == 2000.0
        assert self.cache.age_seconds() == 30

    def test_entry_expires_at_ttl(self):
        self.cache.set(2000.0)
        self.now += 60
        assert self.cache.get() is None
        assert self.cache.size == 1

    def test_set_overwrites_single_entry(self):
        self.cache.set(2000.0)
        self.now += 50
        self.cache.set(2100.0)
        self.now += 50
        assert self.cache.get() == 2100.0
        assert self.cache.size == 1

    def test_clear(self):
        self.cache.set(2000.0)
        self.cache.clear()
        assert self.cache.get() is None
        assert self.cache.size == 0

    def test_key(self):
        assert self.cache.key == CACHE_KEY == "btc_zec_rate"

    @pytest.mark.parametrize("ttl", [0, -1])
    def test_rejects_non_positive_ttl(self, ttl):
        with pytest.raises(ValueError):
            RateCache(ttl_seconds=ttl)
