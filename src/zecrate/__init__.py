"""
ZecRate - Advisory BTC→ZEC Rate Resolver

Resolves a BTC→ZEC conversion rate from one of several public price
providers (CoinGecko, Kraken, Coinbase), caches it briefly and falls back
to the last-known-good or a configured static rate when providers fail.
Pricing only: no funds are moved and no orders are placed.
"""

__version__ = "1.0.0"
