"""
CoinGecko API Provider for BTC→ZEC Rates

Primary provider. One request to the public `simple/price` endpoint returns
USD prices for both assets; the rate is BTC/USD divided by ZEC/USD.

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


class CoinGeckoProvider(RateProvider):
    """
    Expects: {"bitcoin": {"usd": 50000.0}, "zcash": {"usd": 25.0}}
    """

    name = "coingecko"
    quote_currency = "usd"
    asset_ids = ("bitcoin", "zcash")

    @classmethod
    def default_url(cls) -> str:
        return settings.coingecko_url

    def fetch_rate(self) -> float:
        log.info("Fetching BTC and ZEC prices from CoinGecko")
        data = self.get_json(
            self.url,
            params={"ids": ",".join(self.asset_ids), "vs_currencies": self.quote_currency},
        )

        prices = []
        for asset in self.asset_ids:
            node = data.get(asset)
            if not isinstance(node, dict) or self.quote_currency not in node:
                log.error("CoinGecko response missing '%s.%s': %s", asset, self.quote_currency, data)
                raise MalformedResponseError(
                    f"CoinGecko response missing '{asset}.{self.quote_currency}' field", self.name
                )
            prices.append(self.parse_price(node[self.quote_currency], f"{asset} price"))

        btc_usd, zec_usd = prices
        rate = btc_usd / zec_usd
        log.info("CoinGecko: BTC=%s USD, ZEC=%s USD → %s ZEC/BTC", btc_usd, zec_usd, rate)
        return rate
