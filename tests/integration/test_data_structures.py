"""
Integration tests for the primary, secondary and combined data structures.

Vectors follow the ANSI/HIBC 2.5 - 2015 sample product
(LIC A123, PCN BJC5D6E71G, unit of measure 1, lot 3C001).
"""

import pytest
from hibc_udi import (
    DataStructureType,
    DateFormat,
    EncodeOptions,
    ExpirationDate,
    HIBCError,
    MutualExclusionError,
    PrimaryConfig,
    Quantity,
    QuantityFormat,
    SecondaryConfig,
    ValidationError,
    create_combined_data_structure,
    create_primary_data_structure,
    create_secondary_data_structure,
    encode_combined,
    encode_data_structure,
    encode_primary,
    encode_secondary,
    verify_check_char,
)


IDENTITY = {"lic": "A123", "pcn": "BJC5D6E71G", "unit_of_measure": 1}


class TestPrimary:
    """Primary data structure."""

    def test_known_structures(self):
        assert create_primary_data_structure(lic="SNOW", pcn="MAKER", unit_of_measure=0) == "+SNOWMAKER0Q"
        assert create_primary_data_structure(lic="BLUE", pcn="UNICORN", unit_of_measure=7) == "+BLUEUNICORN7N"

    def test_space_check_char(self):
        """A check character of value 38 is a space."""
        assert create_primary_data_structure(lic="A123", pcn="AA4", unit_of_measure=0) == "+A123AA40 "

    def test_no_check_char(self):
        udi = create_primary_data_structure(lic="SNOW", pcn="MAKER", unit_of_measure=0, no_check_char=True)
        assert udi == "+SNOWMAKER0"

    def test_config_object(self):
        assert encode_primary(PrimaryConfig(**IDENTITY)) == "+A123BJC5D6E71G1X"

    def test_numeric_pcn_and_string_uom(self):
        assert create_primary_data_structure(lic="A123", pcn=42, unit_of_measure="0").startswith("+A123420")

    @pytest.mark.parametrize("lic", ["TooLong", "foo", "$OOD", "1234", "", None])
    def test_invalid_lic(self, lic):
        with pytest.raises(ValidationError) as exc_info:
            create_primary_data_structure(lic=lic, pcn="MAKER", unit_of_measure=0)
        assert exc_info.value.field == "lic"

    @pytest.mark.parametrize("pcn", ["", "qwertzu123asdfghjkl", "qwertzu%opa#fghj", None])
    def test_invalid_pcn(self, pcn):
        with pytest.raises(ValidationError) as exc_info:
            create_primary_data_structure(lic="SNOW", pcn=pcn, unit_of_measure=0)
        assert exc_info.value.field == "pcn"

    @pytest.mark.parametrize("uom", [152134, -1, 10, "a", True, None])
    def test_invalid_unit_of_measure(self, uom):
        with pytest.raises(ValidationError) as exc_info:
            create_primary_data_structure(lic="SNOW", pcn="MAKER", unit_of_measure=uom)
        assert exc_info.value.field == "unit_of_measure"

    def test_lax_lic(self):
        """A digit-first LIC is accepted only when strict_lic is disabled."""
        options = EncodeOptions(strict_lic=False)
        assert create_primary_data_structure(lic="1234", pcn="AB", unit_of_measure=0, options=options) == "+1234AB0T"

    def test_lax_lic_still_checks_shape(self):
        with pytest.raises(ValidationError):
            create_primary_data_structure(
                lic="12#4", pcn="AB", unit_of_measure=0, options=EncodeOptions(strict_lic=False)
            )


class TestSecondary:
    """Secondary data structure linked to the sample product."""

    def test_lot(self):
        assert create_secondary_data_structure(**IDENTITY, lot="3C001") == "+$$73C001X3"

    def test_mmyy(self):
        udi = create_secondary_data_structure(
            **IDENTITY, lot="3C001", exp_date={"format": "MMYY", "value": "0905"}
        )
        assert udi == "+$$09053C001XA"

    def test_yymmdd(self):
        udi = create_secondary_data_structure(
            **IDENTITY, lot="3C001", exp_date={"format": DateFormat.YYMMDD, "value": "050928"}
        )
        assert udi == "+$$30509283C001XN"

    def test_yyyymmdd(self):
        """The long date goes to the /14D block, the date slot gets the null flag."""
        udi = create_secondary_data_structure(
            **IDENTITY, lot="3C001", exp_date=ExpirationDate(DateFormat.YYYYMMDD, "20050928")
        )
        assert udi == "+$$73C001/14D20050928X1"

    def test_quantity_and_long_date(self):
        udi = create_secondary_data_structure(
            **IDENTITY,
            lot="3C001",
            quantity=Quantity(QuantityFormat.QQ, "66"),
            exp_date=ExpirationDate(DateFormat.YYYYMMDD, "20050928"),
        )
        assert udi == "+$$86673C001/14D20050928XL"

    def test_serial_only(self):
        assert create_secondary_data_structure(**IDENTITY, sn="0001") == "+$$+70001XT"

    def test_serial_with_date(self):
        udi = create_secondary_data_structure(
            **IDENTITY, sn="0001", exp_date={"format": "MMDDYY", "value": "092805"}
        )
        assert udi == "+$$+20928050001X5"

    def test_manufacture_date(self):
        udi = create_secondary_data_structure(**IDENTITY, lot="3C001", manufacture_date="20160101")
        assert udi == "+$$73C001/16D20160101XV"

    def test_lot_and_serial(self):
        assert create_secondary_data_structure(**IDENTITY, lot="3C001", sn="0001") == "+$$73C001/S0001XT"

    def test_lot_serial_date_and_manufacture_date(self):
        udi = create_secondary_data_structure(
            **IDENTITY,
            lot="3C001",
            sn="0001",
            exp_date={"format": "MMDDYY", "value": "092805"},
            manufacture_date="20000101",
        )
        assert udi == "+$$20928053C001/S0001/16D20000101XQ"

    def test_all_blocks(self):
        """Manufacture date precedes the long expiration date."""
        udi = create_secondary_data_structure(
            **IDENTITY,
            lot="3C001",
            quantity={"format": "QQQQQ", "value": "12345"},
            exp_date={"format": "YYYYMMDD", "value": "20200101"},
            manufacture_date="20160101",
        )
        assert udi == "+$$91234573C001/16D20160101/14D20200101XX"

    def test_no_check_char(self):
        udi = create_secondary_data_structure(**IDENTITY, lot="3C001", no_check_char=True)
        assert udi == "+$$73C001X"

    def test_standalone(self):
        """Without identity there is no link character."""
        assert create_secondary_data_structure(lot="3C001") == "+$$73C001D"
        assert encode_secondary(SecondaryConfig(lot="3C001")) == "+$$73C001D"

    def test_partial_identity(self):
        with pytest.raises(ValidationError) as exc_info:
            create_secondary_data_structure(lic="A123", lot="3C001")
        assert exc_info.value.field == "pcn"

    def test_check_char_verifies(self):
        udi = create_secondary_data_structure(**IDENTITY, lot="3C001", sn="0001")
        assert verify_check_char(udi)

    @pytest.mark.parametrize("field", ["lot", "sn"])
    @pytest.mark.parametrize("value", ["qwertzu123asdfghjkl", "3C€01"])
    def test_invalid_lot_and_serial(self, field, value):
        with pytest.raises(ValidationError) as exc_info:
            create_secondary_data_structure(**IDENTITY, **{field: value})
        assert exc_info.value.field == field

    @pytest.mark.parametrize("format,value", [
        ("QQ", "1"),
        ("QQQQQ", "125"),
        ("QQQQQ", 10000000000000),
        ("QQ", "1a"),
    ])
    def test_invalid_quantity(self, format, value):
        with pytest.raises(ValidationError):
            create_secondary_data_structure(**IDENTITY, lot="3C001", quantity={"format": format, "value": value})

    def test_unknown_quantity_format(self):
        with pytest.raises(ValidationError) as exc_info:
            create_secondary_data_structure(**IDENTITY, lot="3C001", quantity={"format": "QQQ", "value": "123"})
        assert exc_info.value.field == "quantity.format"

    @pytest.mark.parametrize("format,value", [
        ("YYMMDD", "01"),
        ("YYYYMMDD", "160101"),
        ("MMYY", "9/05"),
    ])
    def test_invalid_exp_date(self, format, value):
        with pytest.raises(ValidationError) as exc_info:
            create_secondary_data_structure(**IDENTITY, lot="3C001", exp_date={"format": format, "value": value})
        assert exc_info.value.field == "exp_date"

    @pytest.mark.parametrize("value", ["01", "150101"])
    def test_invalid_manufacture_date(self, value):
        with pytest.raises(ValidationError) as exc_info:
            create_secondary_data_structure(**IDENTITY, lot="3C001", manufacture_date=value)
        assert exc_info.value.field == "manufacture_date"

    def test_serial_excludes_quantity(self):
        with pytest.raises(MutualExclusionError) as exc_info:
            create_secondary_data_structure(**IDENTITY, sn="0001", quantity={"format": "QQ", "value": "10"})
        assert exc_info.value.fields == ("sn", "quantity")
        assert isinstance(exc_info.value, HIBCError)

    def test_strict_dates(self):
        """Shape-valid but non-calendar dates pass unless strict_dates is set."""
        exp_date = {"format": "YYMMDD", "value": "050931"}
        udi = create_secondary_data_structure(**IDENTITY, lot="3C001", exp_date=exp_date)
        assert udi.startswith("+$$3050931")

        with pytest.raises(ValidationError, match="calendar date"):
            create_secondary_data_structure(
                **IDENTITY, lot="3C001", exp_date=exp_date, options=EncodeOptions(strict_dates=True)
            )


class TestCombined:
    """Combined data structure."""

    def test_lot(self):
        assert create_combined_data_structure(**IDENTITY, lot="3C001") == "+A123BJC5D6E71G1/$$73C0012"

    def test_quantity_and_dates(self):
        udi = create_combined_data_structure(
            **IDENTITY,
            lot="3C001",
            quantity={"format": "QQQQQ", "value": "12345"},
            exp_date={"format": "YYYYMMDD", "value": "20200101"},
            manufacture_date="20160101",
        )
        assert udi == "+A123BJC5D6E71G1/$$91234573C001/16D20160101/14D20200101W"

    def test_lot_serial_and_dates(self):
        udi = create_combined_data_structure(
            **IDENTITY,
            lot="3C001",
            sn="0001",
            exp_date={"format": "YYYYMMDD", "value": "20200101"},
            manufacture_date="20160101",
        )
        assert udi == "+A123BJC5D6E71G1/$$73C001/S0001/16D20160101/14D20200101Y"

    def test_config_object(self):
        config = SecondaryConfig(identity=PrimaryConfig(**IDENTITY), lot="3C001")
        assert create_combined_data_structure(config) == "+A123BJC5D6E71G1/$$73C0012"
        assert encode_combined(config) == "+A123BJC5D6E71G1/$$73C0012"

    def test_always_has_check_char(self):
        config = SecondaryConfig(identity=PrimaryConfig(**IDENTITY), lot="3C001", no_check_char=True)
        assert encode_combined(config) == "+A123BJC5D6E71G1/$$73C0012"

    def test_config_not_mutated(self):
        config = SecondaryConfig(identity=PrimaryConfig(**IDENTITY), lot="3C001")
        encode_combined(config)
        assert config.identity == PrimaryConfig(**IDENTITY)
        assert config.no_check_char is False

    def test_requires_identity(self):
        with pytest.raises(ValidationError) as exc_info:
            create_combined_data_structure(lot="3C001")
        assert exc_info.value.field == "lic"

    def test_config_and_fields(self):
        config = SecondaryConfig(identity=PrimaryConfig(**IDENTITY), lot="3C001")
        with pytest.raises(TypeError):
            create_combined_data_structure(config, lot="3C002")

    def test_serial_excludes_quantity(self):
        with pytest.raises(MutualExclusionError):
            create_combined_data_structure(**IDENTITY, sn="0001", quantity={"format": "QQ", "value": "10"})


class TestEncodeDataStructure:
    """Dispatch by data structure type."""

    CONFIG = SecondaryConfig(identity=PrimaryConfig(**IDENTITY), lot="3C001")

    @pytest.mark.parametrize("structure,expected", [
        (DataStructureType.PRIMARY, "+A123BJC5D6E71G1X"),
        ("secondary", "+$$73C001X3"),
        ("combined", "+A123BJC5D6E71G1/$$73C0012"),
    ])
    def test_dispatch(self, structure, expected):
        assert encode_data_structure(structure, self.CONFIG) == expected

    def test_primary_uses_config_check_setting(self):
        config = SecondaryConfig(identity=PrimaryConfig(**IDENTITY), no_check_char=True)
        assert encode_data_structure("primary", config) == "+A123BJC5D6E71G1"

    def test_unknown_structure(self):
        with pytest.raises(ValidationError):
            encode_data_structure("tertiary", self.CONFIG)


class TestDeterminism:
    """Repeated encoding of the same fields yields the same string."""

    FIELDS = dict(
        IDENTITY,
        lot="3C001",
        quantity={"format": "QQQQQ", "value": "12345"},
        exp_date={"format": "YYYYMMDD", "value": "20200101"},
        manufacture_date="20160101",
    )

    def test_secondary(self):
        results = {create_secondary_data_structure(**self.FIELDS) for _ in range(50)}
        assert results == {"+$$91234573C001/16D20160101/14D20200101XX"}

    def test_combined(self):
        results = {create_combined_data_structure(**self.FIELDS) for _ in range(50)}
        assert results == {"+A123BJC5D6E71G1/$$91234573C001/16D20160101/14D20200101W"}

    def test_lot_and_serial(self):
        fields = dict(IDENTITY, lot="3C001", sn="0001",
                      exp_date={"format": "MMDDYY", "value": "092805"}, manufacture_date="20000101")
        results = {create_secondary_data_structure(**fields) for _ in range(50)}
        assert results == {"+$$20928053C001/S0001/16D20000101XQ"}
