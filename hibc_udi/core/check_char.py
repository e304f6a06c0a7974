"""
HIBC check character generation.
"""

from __future__ import annotations

from .mod43 import from_mod43, to_mod43


def generate_check_char(data: str) -> str:
    """
    Calculate the HIBC Modulo-43 check character.

    Algorithm (ANSI/HIBC 2.5, Appendix B):
    1. From right to left, look up the Modulo-43 value of every character
    2. Sum all values
    3. Check character = table entry at (sum mod 43)

    Args:
        data: Data characters without check character

    Returns:
        Single check character
    """
    total = 0
    for char in reversed(data):
        total += to_mod43(char)
    return from_mod43(total % 43)


def verify_check_char(value: str) -> bool:
    """Check that the last character of value is the check character of the rest."""
    if not value or len(value) < 2:
        return False
    return generate_check_char(value[:-1]) == from_mod43(to_mod43(value[-1]))
