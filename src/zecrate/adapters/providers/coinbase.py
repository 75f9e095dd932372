"""
Coinbase API Provider for BTC→ZEC Rates

Issues two independent spot-price lookups (BTC-USD and ZEC-USD) and divides
them. Each response looks like {"data": {"base": "BTC", "currency": "USD",
"amount": "50000.00"}}.

Files that USE this module:
- zecrate.adapters.providers (provider registry)
- tests.test_providers (unit tests)

Files that this module USES:
- zecrate.adapters.providers.base (RateProvider interface)
- zecrate.config (settings for API configuration)
"""
import logging

from zecrate.adapters.providers.base import RateProvider
from zecrate.config import settings
from zecrate.domain.errors import MalformedResponseError

log = logging.getLogger(__name__)


class CoinbaseProvider(RateProvider):
    name = "coinbase"
    quote_currency = "USD"

    @classmethod
    def default_url(cls) -> str:
        return settings.coinbase_url

    def spot_price(self, asset: str) -> float:
        """
        Get the spot price of one asset in the quote currency.

        Args:
            asset: Asset symbol, e.g. 'BTC'

        Returns:
            Spot price as positive float

        Raises:
            ProviderError: On network, HTTP or shape errors
        """
        pair = f"{asset}-{self.quote_currency}"
        data = self.get_json(f"{self.url.rstrip('/')}/{pair}/spot")
        node = data.get("data")
        if not isinstance(node, dict) or "amount" not in node:
            log.error("Coinbase %s response missing 'data.amount': %s", pair, data)
            raise MalformedResponseError(f"Coinbase {pair} response missing 'data.amount' field", self.name)
        return self.parse_price(node["amount"], f"{pair} amount")

    def fetch_rate(self) -> float:
        log.info("Fetching BTC and ZEC spot prices from Coinbase")
        btc_usd = self.spot_price("BTC")
        zec_usd = self.spot_price("ZEC")
        rate = btc_usd / zec_usd
        log.info("Coinbase: BTC=%s USD, ZEC=%s USD → %s ZEC/BTC", btc_usd, zec_usd, rate)
        return rate
