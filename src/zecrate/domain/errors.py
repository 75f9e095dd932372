"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions for rate resolution.
Provider errors describe why a single quote fetch failed; the resolver
collapses them into its fallback chain and never lets them reach callers.
"""
from typing import Optional


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class ProviderError(DomainError):
    """Raised by a provider adapter when a quote cannot be fetched."""

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        self.provider = provider


class NetworkTimeoutError(ProviderError):
    """Raised when a provider call times out or the connection fails."""
    pass


class ProviderHttpError(ProviderError):
    """Raised when a provider answers with an HTTP error status."""

    def __init__(self, message: str, provider: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message, provider)
        self.status_code = status_code


class MalformedResponseError(ProviderError):
    """Raised when a provider response is not valid JSON or misses expected fields."""
    pass


class PairNotFoundError(ProviderError):
    """Raised when the provider does not list the requested trading pair."""
    pass


class RateUnavailableError(DomainError):
    """Raised when no rate can be produced at all, not even the static fallback."""
    pass


class InvalidAmountError(DomainError, ValueError):
    """Raised when a BTC amount is not a finite positive number."""
    pass


class ExchangeNotImplementedError(DomainError, NotImplementedError):
    """Raised by every attempt to execute an exchange order."""
    pass
