"""
Utility helpers for the label generator UI.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Union

from dateutil.relativedelta import relativedelta

from hibc_udi import DateFormat


_STRFTIME = {
    DateFormat.MMYY: "%m%y",
    DateFormat.MMDDYY: "%m%d%y",
    DateFormat.YYMMDD: "%y%m%d",
    DateFormat.YYMMDDHH: "%y%m%d%H",
    DateFormat.YYJJJ: "%y%j",
    DateFormat.YYJJJHH: "%y%j%H",
    DateFormat.YYYYMMDD: "%Y%m%d",
}


def parse_yyyymmdd(value: str) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.strptime(value, "%Y%m%d")
    except ValueError:
        return None


def expiry_from_shelf_life(manufacture_date: str, months: int) -> str:
    """
    Expiration date as YYYYMMDD, shelf life months after manufacture_date
    (YYYYMMDD). Month ends are clamped, e.g. 20240131 + 1 month = 20240229.
    """
    dt = parse_yyyymmdd(manufacture_date)
    if not dt:
        raise ValueError(f"Manufacture date must be YYYYMMDD, got {manufacture_date!r}")
    return (dt + relativedelta(months=months)).strftime("%Y%m%d")


def format_date_for(value: Union[date, datetime], fmt: Union[DateFormat, str]) -> str:
    """Render a date in the digits of an HIBC date format."""
    return value.strftime(_STRFTIME[DateFormat(fmt)])


def safe_get(data: Dict[str, Any], key: str, default: Optional[str] = None) -> Optional[str]:
    """Cell value as stripped text, or default for missing/blank/NaN cells."""
    value = data.get(key, default)
    if value is None:
        return default
    if isinstance(value, float) and value != value:
        return default
    text = str(value).strip()
    return text if text else default
