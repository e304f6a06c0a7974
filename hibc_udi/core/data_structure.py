"""
HIBC Data Structure Encoder

Builds the HIBC Supplier Labeling data structures for a Unique Device
Identification (UDI):
- Primary data structure: labeler, product/catalog number, unit of measure
- Secondary data structure: quantity, expiration date, lot/serial,
  manufacture date, linked back to the primary via its check character
- Combined data structure: primary and secondary in one symbol

Based on:
- ANSI/HIBC 2.5 - 2015, chapters 2.2 and 2.3
- Appendix B (Modulo-43 check character)
- Appendix E (quantity/date flags)

Key HIBC rules:
- Every data structure starts with the flag character "+"
- The check character, when present, is always the last character
- In a combined structure the secondary's flag becomes the "/" delimiter,
  and only one check character (over everything) is kept
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Type, TypeVar, Union

from ..errors import MutualExclusionError, ValidationError
from ..formats import NULL_DATE_FLAG, DateFormat, FieldFlag, QuantityFormat
from ..formatters.fields import (
    HIBC_DATA_DELIMITER,
    HIBC_FLAG,
    format_exp_date,
    format_field,
    format_manufacture_date,
    format_qty,
    get_qty_flag,
)
from ..validators.validators import (
    PATTERNS,
    has_length,
    is_alpha_start,
    is_alphanumeric,
    is_date,
    is_numeric,
    is_value,
    validate_date,
)
from .check_char import generate_check_char


logger = logging.getLogger(__name__)

FieldValue = Union[str, int]
E = TypeVar("E", bound=Enum)


class DataStructureType(str, Enum):
    """The three HIBC data structure layouts."""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    COMBINED = "combined"


@dataclass(frozen=True)
class Quantity:
    """Quantity field: 2 or 5 digits, depending on format."""
    format: QuantityFormat
    value: FieldValue


@dataclass(frozen=True)
class ExpirationDate:
    """Expiration date field, value given in the digits of format."""
    format: DateFormat
    value: FieldValue


@dataclass(frozen=True)
class PrimaryConfig:
    """
    Parameters of the primary data structure.

    Attributes:
        lic: Labeler Identification Code, 4 alphanumeric characters,
            the first one alphabetic
        pcn: Labeler's Product or Catalog Number, 1-18 alphanumeric characters
        unit_of_measure: 0 for unit-of-use items, 1-8 for packaging levels
            above it, 9 for variable quantity containers
        no_check_char: Do not append the check character
    """
    lic: Optional[str]
    pcn: Optional[FieldValue]
    unit_of_measure: Optional[int]
    no_check_char: bool = False


@dataclass(frozen=True)
class SecondaryConfig:
    """
    Parameters of the secondary (and combined) data structure.

    The identity fields are held, not inherited: identity is required to
    link a secondary to its primary and for the combined structure, and may
    be left out for a standalone lot-only secondary.

    Attributes:
        identity: Primary data structure fields
        lot: Lot/batch number, 0-18 alphanumeric characters
        sn: Serial number, 0-18 alphanumeric characters
        quantity: Quantity (not allowed together with sn)
        exp_date: Expiration date
        manufacture_date: Manufacture date as YYYYMMDD
        no_check_char: Do not append the check character
    """
    identity: Optional[PrimaryConfig] = None
    lot: Optional[FieldValue] = None
    sn: Optional[FieldValue] = None
    quantity: Optional[Quantity] = None
    exp_date: Optional[ExpirationDate] = None
    manufacture_date: Optional[FieldValue] = None
    no_check_char: bool = False


@dataclass
class EncodeOptions:
    """
    Encoder policy.

    Attributes:
        strict_lic: Require the first LIC character to be alphabetic.
            Disable only for compatibility with labels created before
            the rule was enforced.
        strict_dates: Also reject dates that are not on the calendar
        century_pivot: Year pivot for two-digit years in strict date checks
    """
    strict_lic: bool = True
    strict_dates: bool = False
    century_pivot: int = 51


_MISSING_IDENTITY = PrimaryConfig(lic=None, pcn=None, unit_of_measure=None)


def _coerce_format(enum_cls: Type[E], value: Any, field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ValidationError(field_name, value, f"one of {choices}") from None


def _validate_identity(config: PrimaryConfig, options: EncodeOptions) -> None:
    """Check the primary data structure fields, raising on the first violation."""
    lic = config.lic
    if options.strict_lic:
        if not (is_alphanumeric(lic) and has_length(lic, 4) and is_alpha_start(lic)):
            raise ValidationError(
                "lic", lic,
                "an alphanumeric value with a length of 4, starting with a letter"
            )
    elif not (is_alphanumeric(lic) and has_length(lic, 4)):
        raise ValidationError("lic", lic, "an alphanumeric value with a length of 4")

    if not (is_alphanumeric(config.pcn) and has_length(config.pcn, 1, 18)):
        raise ValidationError("pcn", config.pcn, "an alphanumeric value with a length of 1-18")

    uom = config.unit_of_measure
    if not (is_value(uom) and not isinstance(uom, bool)
            and PATTERNS['unit_of_measure'].fullmatch(str(uom))):
        raise ValidationError("unit_of_measure", uom, "an integer between 0-9")


def _check_date(value: Any, format: DateFormat, field_name: str, options: EncodeOptions) -> None:
    if not is_date(value, format):
        raise ValidationError(
            field_name, value,
            f"a numeric value with a length of {format.length} ({format.value})"
        )
    if options.strict_dates:
        result = validate_date(value, format, options.century_pivot)
        if not result.valid:
            raise ValidationError(field_name, value, f"a calendar date ({result.errors[0]})")


def _primary_body(config: PrimaryConfig, options: EncodeOptions) -> str:
    """Validated primary data structure without check character."""
    _validate_identity(config, options)
    return f"{HIBC_FLAG}{config.lic}{config.pcn}{config.unit_of_measure}"


def _secondary_parts(config: SecondaryConfig, options: EncodeOptions) -> Tuple[str, str]:
    """
    Validate and format the secondary data structure.

    Returns:
        (body, link_char): body without link or check character, and the
        primary's check character ("" for a standalone secondary)
    """
    link_char = ""
    if config.identity is not None:
        link_char = generate_check_char(_primary_body(config.identity, options))

    lot, sn = config.lot, config.sn
    if is_value(lot) and not (is_alphanumeric(lot) and has_length(lot, 0, 18)):
        raise ValidationError("lot", lot, "an alphanumeric value with a length of 0-18")
    if is_value(sn) and not (is_alphanumeric(sn) and has_length(sn, 0, 18)):
        raise ValidationError("sn", sn, "an alphanumeric value with a length of 0-18")

    if is_value(sn) and config.quantity is not None:
        raise MutualExclusionError(
            ("sn", "quantity"),
            "a serial number identifies a single unit"
        )

    field_flag = FieldFlag.SN if is_value(sn) and not is_value(lot) else FieldFlag.LOT

    qty = ""
    if config.quantity is not None:
        qty_format = _coerce_format(QuantityFormat, config.quantity.format, "quantity.format")
        value = config.quantity.value
        if not (is_numeric(value) and has_length(value, qty_format.length)):
            raise ValidationError(
                "quantity", value,
                f"a numeric value with a length of {qty_format.length} ({qty_format.value})"
            )
        qty = format_qty(value, qty_format)

    date = NULL_DATE_FLAG
    long_date = ""
    if config.exp_date is not None:
        date_format = _coerce_format(DateFormat, config.exp_date.format, "exp_date.format")
        _check_date(config.exp_date.value, date_format, "exp_date", options)
        if date_format is DateFormat.YYYYMMDD:
            long_date = format_exp_date(config.exp_date.value, date_format)
        else:
            date = format_exp_date(config.exp_date.value, date_format)

    if is_value(config.manufacture_date):
        _check_date(config.manufacture_date, DateFormat.YYYYMMDD, "manufacture_date", options)

    body = (
        f"{HIBC_FLAG}{get_qty_flag(field_flag)}{qty}{date}"
        f"{format_field(lot, sn)}"
        f"{format_manufacture_date(config.manufacture_date)}"
        f"{long_date}"
    )
    return body, link_char


def encode_primary(config: PrimaryConfig, options: Optional[EncodeOptions] = None) -> str:
    """
    Create the primary data structure: "+" LIC PCN U/M [check character].

    Raises:
        ValidationError: If lic, pcn or unit_of_measure is malformed
    """
    options = options or EncodeOptions()
    pds = _primary_body(config, options)
    if not config.no_check_char:
        pds += generate_check_char(pds)
    logger.debug("Encoded primary data structure %r", pds)
    return pds


def encode_secondary(config: SecondaryConfig, options: Optional[EncodeOptions] = None) -> str:
    """
    Create the secondary data structure.

    Field order: flag, quantity/date flag, quantity, expiration date (or the
    null flag "7"), lot/serial, "/16D" manufacture date, "/14D" expiration
    date, link character, check character.

    Raises:
        ValidationError: If a field is malformed
        MutualExclusionError: If sn and quantity are both given
    """
    options = options or EncodeOptions()
    body, link_char = _secondary_parts(config, options)
    sds = body + link_char
    if not config.no_check_char:
        sds += generate_check_char(sds)
    logger.debug("Encoded secondary data structure %r", sds)
    return sds


def encode_combined(config: SecondaryConfig, options: Optional[EncodeOptions] = None) -> str:
    """
    Create the combined data structure: primary "/" secondary, with a
    single check character over the whole string.

    The secondary's flag character is replaced by the data structure
    delimiter and its link character is dropped. The combined structure
    always carries its check character.

    Raises:
        ValidationError: If a field is malformed or the identity is missing
        MutualExclusionError: If sn and quantity are both given
    """
    options = options or EncodeOptions()
    identity = config.identity or _MISSING_IDENTITY
    primary = _primary_body(identity, options)
    secondary, _ = _secondary_parts(replace(config, identity=None), options)

    cds = f"{primary}{HIBC_DATA_DELIMITER}{secondary[len(HIBC_FLAG):]}"
    cds += generate_check_char(cds)
    logger.debug("Encoded combined data structure %r", cds)
    return cds


def encode_data_structure(
    structure: Union[DataStructureType, str],
    config: SecondaryConfig,
    options: Optional[EncodeOptions] = None
) -> str:
    """
    Encode config as the given data structure type.

    For the primary structure only the identity of config is used, with
    the check character setting of config.
    """
    structure = _coerce_format(DataStructureType, structure, "structure")
    if structure is DataStructureType.PRIMARY:
        identity = config.identity or _MISSING_IDENTITY
        return encode_primary(replace(identity, no_check_char=config.no_check_char), options)
    if structure is DataStructureType.SECONDARY:
        return encode_secondary(config, options)
    return encode_combined(config, options)


def _as_quantity(value: Any) -> Optional[Quantity]:
    if value is None or isinstance(value, Quantity):
        return value
    if isinstance(value, Mapping):
        return Quantity(format=value.get("format"), value=value.get("value"))
    raise ValidationError("quantity", value, "a Quantity or a mapping with format and value")


def _as_exp_date(value: Any) -> Optional[ExpirationDate]:
    if value is None or isinstance(value, ExpirationDate):
        return value
    if isinstance(value, Mapping):
        return ExpirationDate(format=value.get("format"), value=value.get("value"))
    raise ValidationError("exp_date", value, "an ExpirationDate or a mapping with format and value")


def build_secondary_config(
    lic: Optional[str] = None,
    pcn: Optional[FieldValue] = None,
    unit_of_measure: Optional[int] = None,
    lot: Optional[FieldValue] = None,
    sn: Optional[FieldValue] = None,
    quantity: Optional[Union[Quantity, Mapping[str, Any]]] = None,
    exp_date: Optional[Union[ExpirationDate, Mapping[str, Any]]] = None,
    manufacture_date: Optional[FieldValue] = None,
    no_check_char: bool = False,
) -> SecondaryConfig:
    """
    Build a SecondaryConfig from flat keyword fields.

    The identity is attached as soon as any of lic, pcn or unit_of_measure
    is given; quantity and exp_date may be given as mappings with
    "format" and "value" keys.
    """
    identity = None
    if any(is_value(v) for v in (lic, pcn, unit_of_measure)):
        identity = PrimaryConfig(lic=lic, pcn=pcn, unit_of_measure=unit_of_measure)
    return SecondaryConfig(
        identity=identity,
        lot=lot,
        sn=sn,
        quantity=_as_quantity(quantity),
        exp_date=_as_exp_date(exp_date),
        manufacture_date=manufacture_date,
        no_check_char=no_check_char,
    )


def create_primary_data_structure(
    lic: str,
    pcn: FieldValue,
    unit_of_measure: int,
    no_check_char: bool = False,
    options: Optional[EncodeOptions] = None
) -> str:
    """
    Create the primary data structure from keyword fields.

    Example:
        >>> create_primary_data_structure(lic="SNOW", pcn="MAKER", unit_of_measure=0)
        '+SNOWMAKER0Q'
    """
    config = PrimaryConfig(lic=lic, pcn=pcn, unit_of_measure=unit_of_measure,
                           no_check_char=no_check_char)
    return encode_primary(config, options)


def create_secondary_data_structure(
    lic: Optional[str] = None,
    pcn: Optional[FieldValue] = None,
    unit_of_measure: Optional[int] = None,
    lot: Optional[FieldValue] = None,
    sn: Optional[FieldValue] = None,
    quantity: Optional[Union[Quantity, Mapping[str, Any]]] = None,
    exp_date: Optional[Union[ExpirationDate, Mapping[str, Any]]] = None,
    manufacture_date: Optional[FieldValue] = None,
    no_check_char: bool = False,
    options: Optional[EncodeOptions] = None
) -> str:
    """
    Create the secondary data structure from keyword fields.

    Example:
        >>> create_secondary_data_structure(lic="A123", pcn="BJC5D6E71G",
        ...                                 unit_of_measure=1, lot="3C001")
        '+$$73C001X3'
    """
    config = build_secondary_config(
        lic=lic, pcn=pcn, unit_of_measure=unit_of_measure,
        lot=lot, sn=sn, quantity=quantity, exp_date=exp_date,
        manufacture_date=manufacture_date, no_check_char=no_check_char,
    )
    return encode_secondary(config, options)


def create_combined_data_structure(
    config: Optional[SecondaryConfig] = None,
    options: Optional[EncodeOptions] = None,
    **fields: Any
) -> str:
    """
    Create the combined data structure from a SecondaryConfig or from the
    same keyword fields create_secondary_data_structure takes.

    Example:
        >>> create_combined_data_structure(lic="A123", pcn="BJC5D6E71G",
        ...                                unit_of_measure=1, lot="3C001")
        '+A123BJC5D6E71G1/$$73C0012'
    """
    if config is None:
        config = build_secondary_config(**fields)
    elif fields:
        raise TypeError("Pass either a SecondaryConfig or keyword fields, not both")
    return encode_combined(config, options)
