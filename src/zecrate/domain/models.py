"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Provider identity and rate provenance
- Rate quotes and conversion results
- Status snapshots

Files that USE this module:
- zecrate.application.* (resolver builds quotes, results and snapshots)
- zecrate.adapters.providers (provider registry keyed by ProviderName)
- tests.* (tests use domain models for assertions)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
from dataclasses import dataclass  # Decorator for creating data classes
from datetime import datetime  # Date/time utilities for timestamps
from enum import Enum
from typing import Any, Dict, Optional

log = logging.getLogger(__name__)

ADVISORY_NOTE = (
    "Advisory pricing only. Settlement uses a separate native ZEC transfer; "
    "this service prices the conversion and does not move funds."
)


class ProviderName(str, Enum):
    """Supported price-quote providers."""
    COINGECKO = "coingecko"
    KRAKEN = "kraken"
    COINBASE = "coinbase"

    @classmethod
    def primary(cls) -> ProviderName:
        return cls.COINGECKO

    @classmethod
    def parse(cls, value: Any) -> ProviderName:
        """
        Map a configuration value to a provider, defaulting to the primary one.

        Args:
            value: Provider name from configuration (case-insensitive)

        Returns:
            Matching ProviderName, or the primary provider if unrecognized
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            log.warning("Unknown exchange provider %r, defaulting to %s", value, cls.primary().value)
            return cls.primary()


class RateSource(str, Enum):
    """Where a returned rate came from."""
    LIVE = "live"
    CACHE = "cache"
    LAST_KNOWN_GOOD = "last_known_good"
    FALLBACK = "fallback"

    @property
    def is_degraded(self) -> bool:
        return self in (RateSource.LAST_KNOWN_GOOD, RateSource.FALLBACK)


@dataclass(frozen=True)
class RateQuote:
    """
    A resolved BTC→ZEC rate with provenance.

    Attributes:
        rate: ZEC per 1 BTC
        source: How the rate was obtained (live, cache, last-known-good, fallback)
        provider: Provider configured for live fetches
        timestamp: When the quote was resolved
    """
    rate: float
    source: RateSource
    provider: str
    timestamp: datetime

    @property
    def is_degraded(self) -> bool:
        return self.source.is_degraded


@dataclass(frozen=True)
class ConversionResult:
    """
    Advisory BTC→ZEC conversion.

    Attributes:
        btc_amount: Input amount in BTC
        zec_amount: btc_amount * exchange_rate
        exchange_rate: ZEC per 1 BTC used for the conversion
        timestamp: When the conversion was priced
        note: Fixed advisory note about settlement
        rate_source: Provenance of exchange_rate
        provider: Provider configured for live fetches
    """
    btc_amount: float
    zec_amount: float
    exchange_rate: float
    timestamp: datetime
    note: str = ADVISORY_NOTE
    rate_source: RateSource = RateSource.LIVE
    provider: Optional[str] = None

    @property
    def is_degraded(self) -> bool:
        return self.rate_source.is_degraded

    def to_dict(self) -> Dict[str, Any]:
        return {
            "btcAmount": self.btc_amount,
            "zecAmount": self.zec_amount,
            "exchangeRate": self.exchange_rate,
            "timestamp": self.timestamp.isoformat(),
            "note": self.note,
            "rateSource": self.rate_source.value,
            "provider": self.provider,
        }


@dataclass(frozen=True)
class StatusSnapshot:
    """Read-only view of the resolver configuration and cache state."""
    enabled: bool
    exchange_provider: str
    use_exchange: bool
    cached_rates: int
    last_known_good: Optional[float] = None
    last_rate_source: Optional[RateSource] = None


@dataclass(frozen=True)
class ConversionStatus:
    """Status stub for conversion tracking, which is not implemented."""
    conversion_id: str
    status: str = "unavailable"
    message: str = "Conversion tracking is not implemented; rates are advisory only."
