"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from zecrate.shared.validators import (
    is_positive_number,
    parse_positive_float,
    validate_api_key,
)
from zecrate.shared.logging_conf import setup_logging

__all__ = [
    "is_positive_number",
    "parse_positive_float",
    "validate_api_key",
    "setup_logging",
]
