"""
Monoscan type definitions.

This module exports the value types and error types shared across Monoscan.
"""

# Core types
from .core import LineRange

# Error types
from .errors import (
    CatalogError,
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    MonoscanError,
    RecoveryAction,
    ResourceError,
)

__all__ = [
    # Core types
    "LineRange",
    # Error types
    "ErrorCode",
    "ErrorSeverity",
    "RecoveryAction",
    "ErrorContext",
    "MonoscanError",
    "ConfigurationError",
    "ResourceError",
    "CatalogError",
]
