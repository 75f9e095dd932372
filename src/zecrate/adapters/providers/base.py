"""
Base Provider Interface for BTC→ZEC Rate Providers

This module defines the abstract base class for all price-quote providers
and the shared JSON GET helper that maps transport failures onto the
provider error taxonomy.

Files that USE this module:
- zecrate.adapters.providers.coingecko (CoinGeckoProvider implements RateProvider)
- zecrate.adapters.providers.kraken (KrakenProvider implements RateProvider)
- zecrate.adapters.providers.coinbase (CoinbaseProvider implements RateProvider)
- zecrate.application.converter_service (resolver depends on RateProvider)

Files that this module USES:
- zecrate.config (HTTP timeout default)
- zecrate.domain.errors (provider error taxonomy)
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

import requests

from zecrate.config import settings
from zecrate.domain.errors import (
    MalformedResponseError,
    NetworkTimeoutError,
    ProviderHttpError,
)
from zecrate.shared.validators import is_positive_number

log = logging.getLogger(__name__)


class RateProvider(ABC):
    name: str = "unknown"

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.url = base_url or self.default_url()
        self.timeout = timeout or settings.http_timeout_seconds

    @classmethod
    def default_url(cls) -> str:
        raise NotImplementedError

    @abstractmethod
    def fetch_rate(self) -> float:
        """Return the ZEC-per-1-BTC rate as float."""
        raise NotImplementedError

    def get_json(self, url: str, params: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """
        GET a JSON object from the provider with a bounded timeout.

        Raises:
            NetworkTimeoutError: On timeout or connection failure
            ProviderHttpError: On HTTP status >= 400
            MalformedResponseError: On invalid JSON or a non-object body
        """
        try:
            resp = requests.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.Timeout as e:
            log.warning("%s API timeout after %s seconds", self.name, self.timeout)
            raise NetworkTimeoutError(f"{self.name} API timeout after {self.timeout}s", self.name) from e
        except requests.exceptions.ConnectionError as e:
            log.warning("%s API connection failed: %s", self.name, e)
            raise NetworkTimeoutError(f"{self.name} API connection failed: {e}", self.name) from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            log.error("%s API HTTP error %s: %s", self.name, status, e)
            raise ProviderHttpError(f"{self.name} API HTTP error: {e}", self.name, status) from e
        except requests.exceptions.RequestException as e:
            log.warning("%s API request failed: %s", self.name, e)
            raise NetworkTimeoutError(f"{self.name} API request failed: {e}", self.name) from e

        try:
            data = resp.json()
        except ValueError as e:
            log.error("%s API returned invalid JSON: %s", self.name, e)
            raise MalformedResponseError(f"{self.name} API returned invalid JSON: {e}", self.name) from e

        if not isinstance(data, dict):
            log.error("%s unexpected response type: %r", self.name, type(data))
            raise MalformedResponseError(f"{self.name} returned non-dict JSON", self.name)
        return data

    def parse_price(self, value: Any, field: str) -> float:
        """Convert a quoted price to a positive float or raise MalformedResponseError."""
        try:
            price = float(value)
        except (TypeError, ValueError) as e:
            log.error("%s returned non-numeric %s: %r", self.name, field, value)
            raise MalformedResponseError(f"{self.name} returned non-numeric {field}: {value!r}", self.name) from e
        if not is_positive_number(price):
            log.error("%s returned non-positive %s: %s", self.name, field, price)
            raise MalformedResponseError(f"{self.name} returned non-positive {field}: {price}", self.name)
        return price
