"""
Rate Cache - Single-entry TTL Cache for the BTC→ZEC Rate

Holds at most one rate under the key "btc_zec_rate". A new write replaces
the entry; reads only see it while it is younger than the TTL.

Files that USE this module:
- zecrate.application.converter_service (RateResolver owns one RateCache)
- tests.test_rate_cache (unit tests)

Files that this module USES:
- None
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

CACHE_KEY = "btc_zec_rate"


@dataclass(frozen=True)
class CacheEntry:
    rate: float
    fetched_at: float  # clock() reading, seconds


class RateCache:
    """
    Time-bounded cache for one rate.

    The clock must be monotonic; time.monotonic is used unless a test
    injects its own.
    """

    key = CACHE_KEY

    def __init__(self, ttl_seconds: float, clock: Optional[Callable[[], float]] = None):
        if ttl_seconds <= 0:
            raise ValueError("Cache TTL must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock or time.monotonic
        self._entry: Optional[CacheEntry] = None

    def _is_fresh(self, entry: CacheEntry) -> bool:
        return self._clock() - entry.fetched_at < self.ttl_seconds

    def get(self) -> Optional[float]:
        """Return the cached rate if it is within TTL, else None."""
        entry = self._entry
        if entry is None or not self._is_fresh(entry):
            return None
        return entry.rate

    def set(self, rate: float) -> None:
        self._entry = CacheEntry(rate=rate, fetched_at=self._clock())

    def clear(self) -> None:
        self._entry = None

    def age_seconds(self) -> Optional[float]:
        if self._entry is None:
            return None
        return self._clock() - self._entry.fetched_at

    @property
    def size(self) -> int:
        # Expired entries still occupy the slot until overwritten
        return 0 if self._entry is None else 1
