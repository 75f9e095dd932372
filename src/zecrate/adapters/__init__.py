"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (price quote APIs)
"""

__all__ = []
