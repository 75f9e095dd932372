"""
Composition Root Tests - Resolver Wiring from Settings

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- zecrate.app (build_resolver, configure_logging)
- zecrate.config.settings (Settings)
- unittest.mock (patching requests and logging setup)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, patch  # Mock objects and patching for testing without real API calls
import requests  # HTTP library (used for mocking failures)

from zecrate.adapters.providers import CoinbaseProvider, CoinGeckoProvider, KrakenProvider
from zecrate.app import build_resolver, configure_logging
from zecrate.config.settings import Settings
from zecrate.domain.errors import NetworkTimeoutError
from zecrate.domain.models import RateSource


def _settings(**values):
    return Settings(_env_file=None, **values)


class TestBuildResolver:
    @pytest.mark.parametrize("name, cls", [
        ("coingecko", CoinGeckoProvider),
        ("kraken", KrakenProvider),
        ("coinbase", CoinbaseProvider),
        ("not-a-provider", CoinGeckoProvider),
    ])
    def test_provider_selection(self, name, cls):
        resolver = build_resolver(_settings(EXCHANGE_PROVIDER=name))
        assert isinstance(resolver.provider, cls)
        assert resolver.get_status().exchange_provider == cls.name

    def test_settings_flow_into_resolver(self):
        cfg = _settings(
            EXCHANGE_PROVIDER="kraken",
            KRAKEN_URL="http://kraken.test/ticker",
            HTTP_TIMEOUT_SECONDS=2,
            RATE_CACHE_TTL_MS=15000,
            BTC_ZEC_FALLBACK_RATE="1900",
            USE_EXCHANGE=True,
        )

        resolver = build_resolver(cfg)

        assert resolver.provider.url == "http://kraken.test/ticker"
        assert resolver.provider.timeout == 2
        assert resolver.cache.ttl_seconds == 15.0
        assert resolver.fallback_rate == 1900.0
        assert resolver.use_exchange is True

    @patch('zecrate.adapters.providers.base.requests.get')
    def test_end_to_end_live_then_cache(self, mock_get):
        mock_response = Mock()
        mock_response.raise_for_status.return_value = None
        mock_response.json.return_value = {"bitcoin": {"usd": 50000}, "zcash": {"usd": 25}}
        mock_get.return_value = mock_response
        resolver = build_resolver(_settings(EXCHANGE_PROVIDER="coingecko"))

        first = resolver.convert(0.1)
        second = resolver.get_quote()

        assert first.exchange_rate == 2000
        assert first.zec_amount == pytest.approx(200)
        assert second.source == RateSource.CACHE
        mock_get.assert_called_once()

    @patch('zecrate.adapters.providers.base.requests.get')
    def test_end_to_end_timeout_uses_fallback(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()
        resolver = build_resolver(_settings(BTC_ZEC_FALLBACK_RATE="1.0"))

        assert resolver.get_rate() == 1.0

    def test_injected_provider(self):
        fake = Mock()
        fake.name = "fake"
        fake.fetch_rate.side_effect = NetworkTimeoutError("timed out", "fake")

        resolver = build_resolver(_settings(BTC_ZEC_FALLBACK_RATE="3"), provider=fake)

        assert resolver.get_rate() == 3.0
        fake.fetch_rate.assert_called_once()


class TestConfigureLogging:
    @patch('zecrate.app.setup_logging')
    def test_passes_logging_settings(self, mock_setup):
        cfg = _settings(LOG_DIR="/tmp/zecrate-logs", ZECRATE_LOG_STDOUT=False, LOG_BACKUP_COUNT=2)

        configure_logging(cfg)

        _, kwargs = mock_setup.call_args
        assert kwargs["log_dir"] == "/tmp/zecrate-logs"
        assert kwargs["log_stdout"] is False
        assert kwargs["backup_count"] == 2
