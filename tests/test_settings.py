"""
Settings and Validator Tests

This module tests environment-driven configuration: defaults, fallback-rate
sanitizing, provider name normalization, and the validation helpers the
settings rely on.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- zecrate.config.settings (Settings)
- zecrate.shared.validators (validation helpers)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from pydantic import ValidationError

from zecrate.config.settings import Settings
from zecrate.shared.validators import is_positive_number, parse_positive_float, validate_api_key


def _settings(**env):
    return Settings(_env_file=None, **env)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("USE_EXCHANGE", "EXCHANGE_PROVIDER", "BTC_ZEC_FALLBACK_RATE", "RATE_CACHE_TTL_MS"):
            monkeypatch.delenv(var, raising=False)

        cfg = _settings()

        assert cfg.use_exchange is False
        assert cfg.exchange_provider == "coingecko"
        assert cfg.fallback_rate == 1.0
        assert cfg.rate_cache_ttl_ms == 60_000
        assert cfg.cache_ttl_seconds == 60.0
        assert cfg.http_timeout_seconds == 5.0

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("USE_EXCHANGE", "true")
        monkeypatch.setenv("EXCHANGE_PROVIDER", "Kraken")
        monkeypatch.setenv("BTC_ZEC_FALLBACK_RATE", "1850.5")
        monkeypatch.setenv("RATE_CACHE_TTL_MS", "30000")

        cfg = _settings()

        assert cfg.use_exchange is True
        assert cfg.exchange_provider == "kraken"
        assert cfg.fallback_rate == 1850.5
        assert cfg.cache_ttl_seconds == 30.0

    @pytest.mark.parametrize("raw", ["abc", "", "0", "-5", "nan", "inf"])
    def test_malformed_fallback_rate_becomes_one(self, monkeypatch, raw):
        monkeypatch.setenv("BTC_ZEC_FALLBACK_RATE", raw)

        assert _settings().fallback_rate == 1.0

    def test_short_api_key_rejected(self, monkeypatch):
        monkeypatch.setenv("EXCHANGE_API_KEY", "short")

        with pytest.raises(ValidationError):
            _settings()

    def test_ttl_bounds(self, monkeypatch):
        monkeypatch.setenv("RATE_CACHE_TTL_MS", "0")

        with pytest.raises(ValidationError):
            _settings()


class TestValidators:
    def test_validate_api_key(self):
        assert validate_api_key("abcdefghij")
        assert not validate_api_key("")
        assert not validate_api_key("          ")
        assert not validate_api_key("abc")

    @pytest.mark.parametrize("value, expected", [
        (1, True), (0.5, True), (0, False), (-1, False),
        (float("nan"), False), (float("inf"), False), (True, False), ("1", False), (None, False),
    ])
    def test_is_positive_number(self, value, expected):
        assert is_positive_number(value) is expected

    def test_parse_positive_float(self):
        assert parse_positive_float("2.5") == 2.5
        assert parse_positive_float(" 3 ") == 3.0
        assert parse_positive_float("x", default=1.0) == 1.0
        assert parse_positive_float(None, default=7.0) == 7.0
        assert parse_positive_float("-2", default=1.0) == 1.0
