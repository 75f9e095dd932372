"""
Kraken API Provider for BTC→ZEC Rates

Reads the directly quoted ZEC/XBT pair from Kraken's public Ticker endpoint.
Kraken lists some pairs under an extended name (XZECXXBT) and others under
the short one (ZECXBT), so both keys are tried before giving up.

Files that USE this module:
- zecrate.adapters.providers (provider registry)
- tests.test_providers (unit tests)

Files that this module USES:
- zecrate.adapters.providers.base (RateProvider interface)
- zecrate.config (settings for API configuration)
"""
import logging
from typing import Any, Dict, Sequence

from zecrate.adapters.providers.base import RateProvider
from zecrate.config import settings
from zecrate.domain.errors import MalformedResponseError, PairNotFoundError

log = logging.getLogger(__name__)


class KrakenProvider(RateProvider):
    """
    Expects: {"error": [], "result": {"XZECXXBT": {"c": ["0.000500", "1.2"], ...}}}

    `c` is the last trade closed as [price, lot volume]; the price is BTC per
    ZEC, so the rate is its reciprocal.
    """

    name = "kraken"
    pair = "ZECXBT"
    pair_keys: Sequence[str] = ("XZECXXBT", "ZECXBT")

    @classmethod
    def default_url(cls) -> str:
        return settings.kraken_url

    def _find_ticker(self, result: Dict[str, Any]) -> Dict[str, Any]:
        for key in self.pair_keys:
            ticker = result.get(key)
            if ticker is not None:
                log.debug("Kraken ticker found under %s", key)
                return ticker
        log.error("Kraken result has none of %s: keys=%s", list(self.pair_keys), list(result))
        raise PairNotFoundError(f"Kraken pair {self.pair} not found in response", self.name)

    def fetch_rate(self) -> float:
        log.info("Fetching %s ticker from Kraken", self.pair)
        data = self.get_json(self.url, params={"pair": self.pair})

        errors = data.get("error") or []
        if errors:
            log.error("Kraken API returned errors: %s", errors)
            if any("Unknown asset pair" in str(err) for err in errors):
                raise PairNotFoundError(f"Kraken does not list {self.pair}: {errors}", self.name)
            raise MalformedResponseError(f"Kraken API errors: {errors}", self.name)

        result = data.get("result")
        if not isinstance(result, dict):
            log.error("Kraken response missing 'result' field: %s", data)
            raise MalformedResponseError("Kraken response missing 'result' field", self.name)

        ticker = self._find_ticker(result)
        last_trade = ticker.get("c") if isinstance(ticker, dict) else None
        if not isinstance(last_trade, list) or not last_trade:
            log.error("Kraken ticker missing last trade 'c': %s", ticker)
            raise MalformedResponseError("Kraken ticker missing last trade 'c' field", self.name)

        btc_per_zec = self.parse_price(last_trade[0], "last trade price")
        rate = 1.0 / btc_per_zec
        log.info("Kraken: %s last=%s BTC → %s ZEC/BTC", self.pair, btc_per_zec, rate)
        return rate
