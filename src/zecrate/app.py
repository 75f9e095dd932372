"""
Application Entry Point - Resolver Composition Root

Wires settings, logging and the configured provider adapter into a single
RateResolver. A hosting service calls build_resolver() once at startup and
keeps the returned instance for the life of the process.

Files that USE this module:
- Hosting services embedding the resolver
- tests.test_app (wiring tests)

Files that this module USES:
- zecrate.config (settings)
- zecrate.shared.logging_conf (setup_logging)
- zecrate.adapters.providers (make_provider)
- zecrate.application.converter_service (RateResolver)
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from zecrate.adapters.providers import RateProvider, make_provider
from zecrate.application.converter_service import RateResolver
from zecrate.config import Settings, settings
from zecrate.domain.models import ProviderName
from zecrate.shared.logging_conf import setup_logging

log = logging.getLogger(__name__)


def configure_logging(cfg: Settings = settings, level: int = logging.INFO) -> None:
    """Apply the logging section of the settings."""
    setup_logging(
        level=level,
        log_file=cfg.log_file,
        log_dir=cfg.log_dir,
        log_stdout=cfg.log_stdout,
        max_bytes=cfg.log_max_bytes,
        backup_count=cfg.log_backup_count,
    )


def build_resolver(
    cfg: Settings = settings,
    provider: Optional[RateProvider] = None,
    clock: Optional[Callable[[], float]] = None,
) -> RateResolver:
    """
    Build the process-wide resolver from settings.

    Args:
        cfg: Settings instance (defaults to the global settings)
        provider: Optional adapter overriding the configured provider
        clock: Optional monotonic clock for the rate cache

    Returns:
        Configured RateResolver
    """
    if provider is None:
        name = ProviderName.parse(cfg.exchange_provider)
        urls = {
            ProviderName.COINGECKO: cfg.coingecko_url,
            ProviderName.KRAKEN: cfg.kraken_url,
            ProviderName.COINBASE: cfg.coinbase_url,
        }
        provider = make_provider(name, base_url=urls[name], timeout=cfg.http_timeout_seconds)

    resolver = RateResolver(
        provider=provider,
        fallback_rate=cfg.fallback_rate,
        ttl_seconds=cfg.cache_ttl_seconds,
        use_exchange=cfg.use_exchange,
        clock=clock,
    )
    log.info(
        "Rate resolver ready: provider=%s, ttl=%sms, fallback=%s, use_exchange=%s",
        resolver.provider_name, cfg.rate_cache_ttl_ms, cfg.fallback_rate, cfg.use_exchange,
    )
    return resolver
