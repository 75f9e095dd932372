"""
Input Validation Utilities - Configuration and Amount Validation

This module provides validation helpers for exchange credentials, static
fallback rates and BTC amounts passed to the converter.

Files that USE this module:
- zecrate.config.settings (uses validation functions in Settings field validators)
- zecrate.application.converter_service (validates fallback rates and amounts)

Files that this module USES:
- None (pure utility functions)
"""
import math
from typing import Any


def validate_api_key(api_key: str, min_length: int = 10) -> bool:
    """
    Validate API key format.

    Args:
        api_key: API key to validate
        min_length: Minimum length requirement

    Returns:
        True if valid, False otherwise
    """
    if not api_key:
        return False

    return len(api_key) >= min_length and not api_key.isspace()


def is_positive_number(value: Any) -> bool:
    """
    Check that a value is a finite number strictly greater than zero.

    Booleans are rejected even though they are ints in Python.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def parse_positive_float(value: Any, default: float = 1.0) -> float:
    """
    Parse a positive float, returning a default for anything unusable.

    Args:
        value: Raw value (string from the environment, number, or None)
        default: Value returned when parsing fails or the result is not positive

    Returns:
        Parsed positive float, or default
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        parsed = float(str(value).strip())
    except ValueError:
        return default
    if not is_positive_number(parsed):
        return default
    return parsed
