"""
HIBC Field Formatters

Turns validated field values into the fixed-format substrings of the
secondary data structure (ANSI/HIBC 2.5 - 2015, chapter 2.3 and
Appendix E), plus the human-readable form printed beneath a barcode.

All functions expect input that already passed validation.
"""

from __future__ import annotations

import re
from typing import Optional, Union

from ..formats import NULL_DATE_FLAG, DateFormat, FieldFlag, QuantityFormat


HIBC_FLAG = "+"
HIBC_QTY_FLAG = "$$"
HIBC_BARCODE_DELIMITER = "*"
HIBC_DATA_DELIMITER = "/"
HIBC_SERIAL_DELIMITER = f"{HIBC_DATA_DELIMITER}S"

HIBC_MANUFACTURE_DATE_PREFIX = "16D"
HIBC_LONG_EXP_DATE_PREFIX = "14D"

_WHITESPACE = re.compile(r"\s")

FieldValue = Union[str, int]


def format_field(lot: Optional[FieldValue] = None, sn: Optional[FieldValue] = None) -> str:
    """
    Format the lot/serial field.

    Both given: "{lot}/S{sn}". One given: its string form. None: "".
    """
    if lot is not None and sn is not None:
        return f"{lot}{HIBC_SERIAL_DELIMITER}{sn}"
    if lot is not None:
        return str(lot)
    if sn is not None:
        return str(sn)
    return ""


def get_qty_flag(flag: FieldFlag) -> str:
    """
    Get the quantity/date flag. A serial number field appends the
    HIBC flag character to it.
    """
    return HIBC_QTY_FLAG + ("" if flag is FieldFlag.LOT else HIBC_FLAG)


def format_qty(value: FieldValue, format: QuantityFormat) -> str:
    """Prefix the quantity with its format character (8 or 9)."""
    return f"{QuantityFormat(format).flag}{value}"


def format_exp_date(value: Optional[FieldValue] = None, format: Optional[DateFormat] = None) -> str:
    """
    Format the expiration date.

    Handles:
    - No date: the null flag "7"
    - MMYY: the date itself, no prefix
    - YYYYMMDD: the supplemental "/14D" block (ANSI/HIBC 2.5, 2.3.2.3);
      the caller puts the null flag in the short date slot
    - Everything else: format character + date

    Args:
        value: Date digits
        format: Date format of value

    Returns:
        Formatted date substring
    """
    if value is None:
        return NULL_DATE_FLAG

    format = DateFormat(format)
    if format is DateFormat.MMYY:
        return str(value)
    if format is DateFormat.YYYYMMDD:
        return f"{HIBC_DATA_DELIMITER}{HIBC_LONG_EXP_DATE_PREFIX}{value}"
    return f"{format.flag}{value}"


def format_manufacture_date(value: Optional[FieldValue] = None) -> str:
    """Prefix the manufacture date (ANSI/HIBC 2.5, 2.3.2.2), or "" if absent."""
    if value is None:
        return ""
    return f"{HIBC_DATA_DELIMITER}{HIBC_MANUFACTURE_DATE_PREFIX}{value}"


def barcodify(data: str) -> str:
    """
    Human-readable form placed under the barcode (ANSI/HIBC 2.5, 4.1):
    wrapped in "*" with spaces shown as "_".
    """
    return f"{HIBC_BARCODE_DELIMITER}{_WHITESPACE.sub('_', data)}{HIBC_BARCODE_DELIMITER}"
