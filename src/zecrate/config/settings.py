"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables (or a .env file) and are read once
at startup; there is no reload.

Files that USE this module:
- zecrate.app (builds the resolver from settings)
- zecrate.adapters.providers.* (endpoint URLs and HTTP timeout)

Files that this module USES:
- zecrate.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
from typing import Any, Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from zecrate.shared.validators import parse_positive_float, validate_api_key

log = logging.getLogger(__name__)

DEFAULT_FALLBACK_RATE = 1.0


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Exchange ---
    use_exchange: bool = Field(default=False, alias="USE_EXCHANGE")
    exchange_provider: str = Field(default="coingecko", alias="EXCHANGE_PROVIDER")
    exchange_api_key: str = Field(default="", alias="EXCHANGE_API_KEY")  # unused by the public endpoints
    exchange_api_secret: str = Field(default="", alias="EXCHANGE_API_SECRET")

    # --- Pricing ---
    fallback_rate: float = Field(default=DEFAULT_FALLBACK_RATE, alias="BTC_ZEC_FALLBACK_RATE")
    rate_cache_ttl_ms: int = Field(default=60_000, alias="RATE_CACHE_TTL_MS", ge=1, le=86_400_000)

    # --- HTTP Settings ---
    http_timeout_seconds: float = Field(default=5.0, alias="HTTP_TIMEOUT_SECONDS", gt=0, le=60)
    coingecko_url: str = Field(
        default="https://api.coingecko.com/api/v3/simple/price", alias="COINGECKO_URL"
    )
    kraken_url: str = Field(default="https://api.kraken.com/0/public/Ticker", alias="KRAKEN_URL")
    coinbase_url: str = Field(default="https://api.coinbase.com/v2/prices", alias="COINBASE_URL")

    # --- Logging (for server deployment) ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="ZECRATE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("fallback_rate", mode="before")
    @classmethod
    def validate_fallback_rate(cls, v: Any) -> float:
        """Malformed or non-positive fallback rates become 1."""
        rate = parse_positive_float(v, default=0.0)
        if rate <= 0:
            log.warning("Invalid BTC_ZEC_FALLBACK_RATE %r, using %s", v, DEFAULT_FALLBACK_RATE)
            return DEFAULT_FALLBACK_RATE
        return rate

    @field_validator("exchange_provider")
    @classmethod
    def normalize_provider(cls, v: str) -> str:
        """Provider names are compared case-insensitively."""
        return v.strip().lower()

    @field_validator("exchange_api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate API key format when one is configured."""
        if v and not validate_api_key(v):
            raise ValueError("Invalid EXCHANGE_API_KEY format")
        return v

    @property
    def cache_ttl_seconds(self) -> float:
        return self.rate_cache_ttl_ms / 1000.0


# Global settings instance
settings = Settings()
