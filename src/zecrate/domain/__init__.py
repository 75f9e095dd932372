"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from zecrate.domain.models import (
    ADVISORY_NOTE,
    ConversionResult,
    ConversionStatus,
    ProviderName,
    RateQuote,
    RateSource,
    StatusSnapshot,
)
from zecrate.domain.errors import (
    DomainError,
    ExchangeNotImplementedError,
    InvalidAmountError,
    MalformedResponseError,
    NetworkTimeoutError,
    PairNotFoundError,
    ProviderError,
    ProviderHttpError,
    RateUnavailableError,
)

__all__ = [
    "ADVISORY_NOTE",
    "ConversionResult",
    "ConversionStatus",
    "ProviderName",
    "RateQuote",
    "RateSource",
    "StatusSnapshot",
    "DomainError",
    "ProviderError",
    "NetworkTimeoutError",
    "ProviderHttpError",
    "MalformedResponseError",
    "PairNotFoundError",
    "RateUnavailableError",
    "InvalidAmountError",
    "ExchangeNotImplementedError",
]
