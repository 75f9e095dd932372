"""
Converter Service - BTC→ZEC Rate Resolution and Advisory Conversion

This module contains the rate-resolution pipeline: a fresh cached rate is
served without network access; on a miss the configured provider is asked
for a live quote; when the provider fails the last-known-good rate is used,
and when there is none the static fallback rate is used.

Files that USE this module:
- zecrate.app (build_resolver wires settings into RateResolver)
- tests.test_converter_service (unit tests)

Files that this module USES:
- zecrate.adapters.providers.base (RateProvider interface)
- zecrate.application.rate_cache (RateCache)
- zecrate.domain (models and errors)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from zecrate.adapters.providers.base import RateProvider
from zecrate.application.rate_cache import RateCache
from zecrate.domain.errors import (
    ExchangeNotImplementedError,
    InvalidAmountError,
    RateUnavailableError,
)
from zecrate.domain.models import (
    ADVISORY_NOTE,
    ConversionResult,
    ConversionStatus,
    RateQuote,
    RateSource,
    StatusSnapshot,
)
from zecrate.shared.validators import is_positive_number

log = logging.getLogger(__name__)

EXECUTION_GUIDANCE = (
    "Exchange execution is not supported. This service only prices BTC→ZEC "
    "conversions; settle with a native ZEC transfer through your own wallet or exchange."
)


class RateResolver:
    """
    Resolves the ZEC-per-BTC rate with caching and a three-tier fallback.

    All mutable state (cache entry, last-known-good rate) belongs to the
    instance and is guarded by a lock. The lock is held across a cache-miss
    fetch so concurrent misses result in a single provider call.
    """

    def __init__(
        self,
        provider: RateProvider,
        fallback_rate: float,
        ttl_seconds: float = 60.0,
        use_exchange: bool = False,
        provider_name: Optional[str] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Initialize the resolver.

        Args:
            provider: Adapter whose fetch_rate() returns ZEC per 1 BTC
            fallback_rate: Static rate used when no live or last-known-good rate exists
            ttl_seconds: Cache validity window
            use_exchange: Execution-mode flag from configuration (reported only)
            provider_name: Name reported in status and results (defaults to provider.name)
            clock: Monotonic clock for the cache (defaults to time.monotonic)
        """
        self.provider = provider
        self.provider_name = provider_name or getattr(provider, "name", type(provider).__name__)
        self.fallback_rate = fallback_rate
        self.use_exchange = use_exchange
        self.cache = RateCache(ttl_seconds, clock=clock)
        self._last_known_good: Optional[float] = None
        self._last_source: Optional[RateSource] = None
        self._lock = threading.Lock()

    @property
    def last_known_good(self) -> Optional[float]:
        return self._last_known_good

    def _quote(self, rate: float, source: RateSource) -> RateQuote:
        self._last_source = source
        return RateQuote(
            rate=rate,
            source=source,
            provider=self.provider_name,
            timestamp=datetime.now(timezone.utc),
        )

    def _fallback_quote(self, error: Exception) -> RateQuote:
        if self._last_known_good is not None:
            log.warning(
                "%s fetch failed (%s: %s), using last known good rate %s",
                self.provider_name, type(error).__name__, error, self._last_known_good,
            )
            return self._quote(self._last_known_good, RateSource.LAST_KNOWN_GOOD)

        if not is_positive_number(self.fallback_rate):
            log.error("No usable rate: provider failed and fallback rate %r is invalid", self.fallback_rate)
            raise RateUnavailableError(
                f"No BTC→ZEC rate available: {self.provider_name} failed ({error}) "
                f"and fallback rate {self.fallback_rate!r} is invalid"
            ) from error

        log.warning(
            "%s fetch failed (%s: %s), using static fallback rate %s",
            self.provider_name, type(error).__name__, error, self.fallback_rate,
        )
        return self._quote(self.fallback_rate, RateSource.FALLBACK)

    def get_quote(self) -> RateQuote:
        """
        Resolve the current rate together with where it came from.

        Returns:
            RateQuote with source cache, live, last_known_good or fallback

        Raises:
            RateUnavailableError: Only if the provider fails, no last-known-good
                rate exists and the static fallback rate is unusable
        """
        with self._lock:
            cached = self.cache.get()
            if cached is not None:
                log.debug("Using cached BTC→ZEC rate: %s", cached)
                return self._quote(cached, RateSource.CACHE)

            try:
                rate = self.provider.fetch_rate()
                if not is_positive_number(rate):
                    raise ValueError(f"provider returned non-positive rate {rate!r}")
            except Exception as e:
                return self._fallback_quote(e)

            self.cache.set(rate)
            self._last_known_good = rate
            log.info("BTC→ZEC rate updated from %s: %s (ttl=%ss)", self.provider_name, rate, self.cache.ttl_seconds)
            return self._quote(rate, RateSource.LIVE)

    def get_rate(self) -> float:
        """Return the current ZEC-per-BTC rate."""
        return self.get_quote().rate

    def convert(self, btc_amount: float) -> ConversionResult:
        """
        Price a BTC amount in ZEC.

        Args:
            btc_amount: Positive BTC amount

        Returns:
            ConversionResult with zec_amount = btc_amount * exchange_rate

        Raises:
            InvalidAmountError: If btc_amount is not a finite positive number
            RateUnavailableError: If no rate could be produced at all
        """
        if not is_positive_number(btc_amount):
            raise InvalidAmountError(f"BTC amount must be a positive number, got {btc_amount!r}")

        try:
            quote = self.get_quote()
        except RateUnavailableError:
            raise
        except Exception as e:
            log.exception("Unexpected failure while resolving BTC→ZEC rate")
            raise RateUnavailableError(f"BTC→ZEC rate unavailable: {e}") from e

        zec_amount = btc_amount * quote.rate
        if quote.is_degraded:
            log.warning("Conversion of %s BTC priced with %s rate %s", btc_amount, quote.source.value, quote.rate)
        return ConversionResult(
            btc_amount=btc_amount,
            zec_amount=zec_amount,
            exchange_rate=quote.rate,
            timestamp=quote.timestamp,
            note=ADVISORY_NOTE,
            rate_source=quote.source,
            provider=quote.provider,
        )

    def get_status(self) -> StatusSnapshot:
        """Snapshot of configuration and cache state; no side effects."""
        return StatusSnapshot(
            enabled=True,
            exchange_provider=self.provider_name,
            use_exchange=self.use_exchange,
            cached_rates=self.cache.size,
            last_known_good=self._last_known_good,
            last_rate_source=self._last_source,
        )

    def get_conversion_status(self, conversion_id: Any) -> ConversionStatus:
        return ConversionStatus(conversion_id=str(conversion_id))

    def execute_exchange(self, btc_amount: Any = None, **kwargs: Any) -> None:
        """Exchange execution is not supported and always raises."""
        log.warning("Rejected exchange execution request for %r BTC", btc_amount)
        raise ExchangeNotImplementedError(EXECUTION_GUIDANCE)
