"""
Error taxonomy for the HIBC UDI encoder.

All errors derive from HIBCError, which is a ValueError: every one of them
signals input the encoder cannot turn into a label. They are raised
synchronously and never retried internally.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Tuple


class ErrorCode(str, Enum):
    """Error codes carried by every HIBCError."""
    INVALID_SYMBOL = "INVALID_SYMBOL"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    MUTUAL_EXCLUSION = "MUTUAL_EXCLUSION"
    INVALID_RANGE = "INVALID_RANGE"


class HIBCError(ValueError):
    """Base class for all encoder errors."""
    code: ErrorCode = ErrorCode.VALIDATION_FAILED

    def to_dict(self) -> dict:
        return {"error": str(self), "code": self.code.value}


class InvalidSymbolError(HIBCError):
    """A character has no Modulo-43 value."""
    code = ErrorCode.INVALID_SYMBOL

    def __init__(self, symbol: Any):
        self.symbol = symbol
        super().__init__(f'Given value "{symbol}" does not have a corresponding %43 value.')


class IndexOutOfRangeError(HIBCError):
    """A Modulo-43 index outside 0-42."""
    code = ErrorCode.INDEX_OUT_OF_RANGE

    def __init__(self, index: Any):
        self.index = index
        super().__init__(f"Expected number to be equal/between 0 and 42, got {index}.")


class ValidationError(HIBCError):
    """
    A configuration field violates its format, length or range contract.

    Attributes:
        field: Name of the offending field
        value: The value that was received
        constraint: Human-readable description of the contract
    """
    code = ErrorCode.VALIDATION_FAILED

    def __init__(self, field: str, value: Any, constraint: str):
        self.field = field
        self.value = value
        self.constraint = constraint
        super().__init__(f'Expected "{field}" to be {constraint}, got {value!r}')


class MutualExclusionError(HIBCError):
    """Two fields were given that may not appear together."""
    code = ErrorCode.MUTUAL_EXCLUSION

    def __init__(self, fields: Tuple[str, str], reason: Optional[str] = None):
        self.fields = fields
        message = f'"{fields[0]}" and "{fields[1]}" can not be specified together'
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidRangeError(HIBCError):
    """A length check was asked for an inconsistent min/max pair."""
    code = ErrorCode.INVALID_RANGE

    def __init__(self, min_length: Any, max_length: Any, message: str):
        self.min = min_length
        self.max = max_length
        super().__init__(f"{message}, got [{min_length}, {max_length}]")
