"""
Application Layer - Use Cases and Services

This package contains the rate-resolution service and its cache.
No direct I/O dependencies - uses provider adapters through interfaces.
"""

from zecrate.application.converter_service import RateResolver
from zecrate.application.rate_cache import CACHE_KEY, RateCache

__all__ = [
    "RateResolver",
    "RateCache",
    "CACHE_KEY",
]
