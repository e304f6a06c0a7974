"""
Field formatters for the HIBC UDI encoder.
"""

from .fields import (
    format_field,
    get_qty_flag,
    format_qty,
    format_exp_date,
    format_manufacture_date,
    barcodify,
    HIBC_FLAG,
    HIBC_DATA_DELIMITER,
)

__all__ = [
    "format_field",
    "get_qty_flag",
    "format_qty",
    "format_exp_date",
    "format_manufacture_date",
    "barcodify",
    "HIBC_FLAG",
    "HIBC_DATA_DELIMITER",
]
