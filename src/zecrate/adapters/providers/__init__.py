"""
Provider Adapters - External Price Quote Clients

This package contains adapters for external price APIs.
All providers implement the RateProvider interface and are selected by
name through make_provider.
"""
import logging
from typing import Any, Dict, Type

from zecrate.adapters.providers.base import RateProvider
from zecrate.adapters.providers.coinbase import CoinbaseProvider
from zecrate.adapters.providers.coingecko import CoinGeckoProvider
from zecrate.adapters.providers.kraken import KrakenProvider
from zecrate.domain.models import ProviderName

log = logging.getLogger(__name__)

PROVIDER_REGISTRY: Dict[ProviderName, Type[RateProvider]] = {
    ProviderName.COINGECKO: CoinGeckoProvider,
    ProviderName.KRAKEN: KrakenProvider,
    ProviderName.COINBASE: CoinbaseProvider,
}


def make_provider(name: Any, **kwargs: Any) -> RateProvider:
    """
    Build the provider adapter for a configured name.

    Unrecognized names fall back to the primary provider (CoinGecko).

    Args:
        name: Provider name or ProviderName
        **kwargs: Passed to the provider constructor (base_url, timeout)
    """
    provider_name = ProviderName.parse(name)
    cls = PROVIDER_REGISTRY[provider_name]
    log.info("Using %s rate provider", provider_name.value)
    return cls(**kwargs)


__all__ = [
    "RateProvider",
    "CoinGeckoProvider",
    "CoinbaseProvider",
    "KrakenProvider",
    "PROVIDER_REGISTRY",
    "make_provider",
]
