"""
Modulo-43 table and codec.

Table of numerical value assignments for computing the HIBC LIC data
format check character (ANSI/HIBC 2.5 - 2015, Appendix B).
"""

from __future__ import annotations

from typing import Dict, Tuple

from ..errors import IndexOutOfRangeError, InvalidSymbolError


MOD43_TABLE: Tuple[str, ...] = tuple("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%")

_MOD43_INDEX: Dict[str, int] = {symbol: index for index, symbol in enumerate(MOD43_TABLE)}


def to_mod43(value: str) -> int:
    """
    Get the Modulo-43 value (0-42) of a single character.

    Lowercase ASCII letters map to their uppercase value.

    Raises:
        InvalidSymbolError: If the character is not in the table
    """
    text = str(value)
    # "ı" and "ſ" uppercase to "I" and "S"
    if not text.isascii():
        raise InvalidSymbolError(value)
    index = _MOD43_INDEX.get(text.upper())
    if index is None:
        raise InvalidSymbolError(value)
    return index


def from_mod43(index: int) -> str:
    """
    Get the character for a Modulo-43 value.

    Raises:
        IndexOutOfRangeError: Unless 0 <= index <= 42
    """
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index <= 42:
        raise IndexOutOfRangeError(index)
    return MOD43_TABLE[index]
