"""
Validation modules for the HIBC UDI encoder.
"""

from .validators import (
    is_value,
    is_alphanumeric,
    is_numeric,
    has_length,
    is_date,
    is_alpha_start,
    validate_date,
    ValidationResult,
    PATTERNS,
)

__all__ = [
    "is_value",
    "is_alphanumeric",
    "is_numeric",
    "has_length",
    "is_date",
    "is_alpha_start",
    "validate_date",
    "ValidationResult",
    "PATTERNS",
]
