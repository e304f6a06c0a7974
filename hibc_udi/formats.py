"""
HIBC format tags.

Closed sets of the format characters defined by ANSI/HIBC 2.5 - 2015,
Appendix E1.1, each with its fixed digit length and flag character.
"""

from __future__ import annotations

from enum import Enum


class FieldFlag(Enum):
    """
    What the variable data field (field descriptor "B", ANSI/HIBC 2.5 2.2.1)
    refers to. A serial number is signalled by appending "+" to the
    quantity flag.
    """
    LOT = "LOT"
    SN = "SN"


class QuantityFormat(str, Enum):
    """Quantity given with 2 or 5 digits."""
    QQ = "QQ"
    QQQQQ = "QQQQQ"

    @property
    def length(self) -> int:
        return len(self.value)

    @property
    def flag(self) -> str:
        return _QUANTITY_FLAGS[self]


class DateFormat(str, Enum):
    """
    Expiration date formats.

    MMYY carries no flag: the first digit of the month (0 or 1) doubles as
    the format character. YYYYMMDD has no short form either; it is encoded
    in the supplemental "/14D" block while the date slot gets the null flag.
    """
    MMYY = "MMYY"            # (month/year)
    MMDDYY = "MMDDYY"        # (month/day/year)
    YYMMDD = "YYMMDD"        # (year/month/day)
    YYMMDDHH = "YYMMDDHH"    # (year/month/day/hour G.M.T.)
    YYJJJ = "YYJJJ"          # (year/Julian day)
    YYJJJHH = "YYJJJHH"      # (year/Julian day/hour G.M.T.)
    YYYYMMDD = "YYYYMMDD"    # (full year/month/day), supplemental encoding

    @property
    def length(self) -> int:
        return len(self.value)

    @property
    def flag(self) -> str:
        return _DATE_FLAGS[self]


_QUANTITY_FLAGS = {
    QuantityFormat.QQ: "8",
    QuantityFormat.QQQQQ: "9",
}

# Date field is null, lot field follows
NULL_DATE_FLAG = "7"

_DATE_FLAGS = {
    DateFormat.MMYY: "",
    DateFormat.MMDDYY: "2",
    DateFormat.YYMMDD: "3",
    DateFormat.YYMMDDHH: "4",
    DateFormat.YYJJJ: "5",
    DateFormat.YYJJJHH: "6",
    DateFormat.YYYYMMDD: NULL_DATE_FLAG,
}
