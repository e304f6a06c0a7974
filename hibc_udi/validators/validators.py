"""
HIBC Validation Functions

Implements the field checks used by the data-structure encoder:
- Presence, alphanumeric and numeric checks
- Length range checks
- Date shape checks for every HIBC date format
- Calendar validation of date values (opt-in strict mode)

Based on ANSI/HIBC 2.5 - 2015.
"""

from __future__ import annotations

import re
from calendar import isleap, monthrange
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..errors import InvalidRangeError
from ..formats import DateFormat


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


# Precompiled regex patterns for common validations
PATTERNS = {
    'alphanumeric': re.compile(r'[A-Za-z0-9]*'),
    'numeric': re.compile(r'[0-9]*'),
    'alpha': re.compile(r'[A-Za-z]'),
    'unit_of_measure': re.compile(r'[0-9]'),
}


def is_value(value: Any) -> bool:
    """Checks whether a value is given at all (not None)."""
    return value is not None


def is_alphanumeric(value: Any) -> bool:
    """
    Checks whether the string form of value only holds A-Z, a-z and 0-9.
    The empty string counts as alphanumeric.
    """
    return is_value(value) and PATTERNS['alphanumeric'].fullmatch(str(value)) is not None


def is_numeric(value: Any) -> bool:
    """Checks whether the string form of value only holds digits (or is empty)."""
    return is_value(value) and PATTERNS['numeric'].fullmatch(str(value)) is not None


def has_length(value: Any, min_length: int, max_length: Optional[int] = None) -> bool:
    """
    Checks whether the string form of value has a length within
    [min_length, max_length]. If max_length is omitted the length must be
    exactly min_length.

    Raises:
        InvalidRangeError: If min_length > max_length or either is negative
    """
    if max_length is None:
        max_length = min_length
    if min_length > max_length:
        raise InvalidRangeError(
            min_length, max_length,
            'Expected "min" to equal or smaller than "max" to do a range check'
        )
    if min_length < 0 or max_length < 0:
        raise InvalidRangeError(
            min_length, max_length,
            'Expected "min" and "max" to be positive integers'
        )
    length = len(str(value))
    return min_length <= length <= max_length


def is_date(value: Any, format: DateFormat) -> bool:
    """Checks whether value is all digits with the length the date format needs."""
    return is_numeric(value) and has_length(value, DateFormat(format).length)


def is_alpha_start(value: Any) -> bool:
    """Checks whether the first character of value is a letter."""
    text = str(value) if is_value(value) else ""
    return bool(text) and PATTERNS['alpha'].fullmatch(text[0]) is not None


def validate_date(
    value: Any,
    format: DateFormat,
    century_pivot: int = 51
) -> ValidationResult:
    """
    Validate that a date value names a real calendar date.

    Formats:
    - MMYY: month/year
    - MMDDYY, YYMMDD: day precision
    - YYMMDDHH: with hour (G.M.T.)
    - YYJJJ, YYJJJHH: Julian day, optionally with hour
    - YYYYMMDD: full year

    Century pivot (default 51):
    - YY >= 51: 19YY (1951-1999)
    - YY < 51: 20YY (2000-2050)

    Args:
        value: Date digits
        format: Date format of value
        century_pivot: Year pivot for century determination

    Returns:
        ValidationResult with parsed date parts in meta
    """
    result = ValidationResult(valid=True)
    format = DateFormat(format)

    if not is_date(value, format):
        result.valid = False
        result.errors.append(f"{format.value} date must be {format.length} digits, got {value!r}")
        return result

    digits = str(value)
    parts = _split_date(digits, format)

    if 'yy' in parts:
        yy = parts.pop('yy')
        parts['year'] = 1900 + yy if yy >= century_pivot else 2000 + yy

    year = parts['year']

    if 'julian' in parts:
        days_in_year = 366 if isleap(year) else 365
        if not 1 <= parts['julian'] <= days_in_year:
            result.valid = False
            result.errors.append(f"Invalid Julian day {parts['julian']} for year {year}")
            return result
    else:
        month = parts['month']
        if month < 1 or month > 12:
            result.valid = False
            result.errors.append(f"Invalid month: {month}")
            return result

        if 'day' in parts:
            day = parts['day']
            max_day = monthrange(year, month)[1]
            if day < 1 or day > max_day:
                result.valid = False
                result.errors.append(f"Day {day} invalid for month {month} in year {year}")
                return result
            result.meta['iso_date'] = f"{year:04d}-{month:02d}-{day:02d}"

    if 'hour' in parts and parts['hour'] > 23:
        result.valid = False
        result.errors.append(f"Invalid hour: {parts['hour']}")
        return result

    result.meta.update(parts)
    return result


def _split_date(digits: str, format: DateFormat) -> Dict[str, int]:
    """Split date digits into named integer parts according to format."""
    if format is DateFormat.MMYY:
        return {'month': int(digits[0:2]), 'yy': int(digits[2:4])}
    if format is DateFormat.MMDDYY:
        return {'month': int(digits[0:2]), 'day': int(digits[2:4]), 'yy': int(digits[4:6])}
    if format is DateFormat.YYMMDD:
        return {'yy': int(digits[0:2]), 'month': int(digits[2:4]), 'day': int(digits[4:6])}
    if format is DateFormat.YYMMDDHH:
        return {
            'yy': int(digits[0:2]),
            'month': int(digits[2:4]),
            'day': int(digits[4:6]),
            'hour': int(digits[6:8]),
        }
    if format is DateFormat.YYJJJ:
        return {'yy': int(digits[0:2]), 'julian': int(digits[2:5])}
    if format is DateFormat.YYJJJHH:
        return {'yy': int(digits[0:2]), 'julian': int(digits[2:5]), 'hour': int(digits[5:7])}
    return {'year': int(digits[0:4]), 'month': int(digits[4:6]), 'day': int(digits[6:8])}
