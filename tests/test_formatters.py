"""
Tests for the secondary data structure field formatters.
"""

from hibc_udi import DateFormat, FieldFlag, QuantityFormat, barcodify
from hibc_udi.formatters import (
    format_exp_date,
    format_field,
    format_manufacture_date,
    format_qty,
    get_qty_flag,
)


class TestFormatField:
    """Lot/serial field."""

    def test_lot_only(self):
        assert format_field(123, None) == "123"
        assert format_field("3C001") == "3C001"

    def test_sn_only(self):
        assert format_field(None, "0001") == "0001"

    def test_lot_and_sn(self):
        assert format_field("201X", 5126143) == "201X/S5126143"

    def test_neither(self):
        assert format_field() == ""


class TestQuantity:
    def test_qty_flag(self):
        assert get_qty_flag(FieldFlag.LOT) == "$$"
        assert get_qty_flag(FieldFlag.SN) == "$$+"

    def test_format_qty(self):
        assert format_qty("55", QuantityFormat.QQ) == "855"
        assert format_qty("12345", QuantityFormat.QQQQQ) == "912345"
        assert format_qty(66, "QQ") == "866"


class TestDates:
    """Expiration and manufacture date formatting."""

    def test_null_date(self):
        assert format_exp_date() == "7"

    def test_mmyy_has_no_prefix(self):
        assert format_exp_date("0905", DateFormat.MMYY) == "0905"

    def test_prefixed_formats(self):
        assert format_exp_date("020299", DateFormat.MMDDYY) == "2020299"
        assert format_exp_date("020202", DateFormat.YYMMDD) == "3020202"
        assert format_exp_date("02020212", DateFormat.YYMMDDHH) == "402020212"
        assert format_exp_date("02032", DateFormat.YYJJJ) == "502032"
        assert format_exp_date("0203212", DateFormat.YYJJJHH) == "60203212"

    def test_long_date(self):
        assert format_exp_date("20000101", DateFormat.YYYYMMDD) == "/14D20000101"

    def test_manufacture_date(self):
        assert format_manufacture_date(None) == ""
        assert format_manufacture_date("20160101") == "/16D20160101"


class TestBarcodify:
    def test_wraps_and_replaces_spaces(self):
        assert barcodify("+A123AA40 ") == "*+A123AA40_*"
        assert barcodify("+SNOWMAKER0Q") == "*+SNOWMAKER0Q*"
