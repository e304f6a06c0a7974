"""
JSON Formatter for HIBC UDI labels

Provides clean, production-ready output of an encoded label with:
- Human-readable field names
- The encoded data structure and its human-readable barcode line
- Check and link characters broken out
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Union

from .core.data_structure import (
    DataStructureType,
    EncodeOptions,
    SecondaryConfig,
    build_secondary_config,
    encode_data_structure,
)
from .core.check_char import generate_check_char
from .formatters.fields import HIBC_FLAG, barcodify


# Config field to human-readable name mapping
FIELD_NAMES = {
    "lic": "Labeler Identification Code",
    "pcn": "Product/Catalog Number",
    "unit_of_measure": "Unit of Measure",
    "lot": "Lot/Batch Number",
    "sn": "Serial Number",
    "quantity": "Quantity",
    "exp_date": "Expiration Date",
    "manufacture_date": "Manufacture Date",
}


def _config_fields(config: SecondaryConfig) -> Dict[str, Any]:
    """Flatten the given fields of config, in label order."""
    fields: Dict[str, Any] = {}
    if config.identity is not None:
        fields["lic"] = config.identity.lic
        fields["pcn"] = config.identity.pcn
        fields["unit_of_measure"] = config.identity.unit_of_measure
    for name in ("lot", "sn"):
        value = getattr(config, name)
        if value is not None:
            fields[name] = value
    if config.quantity is not None:
        fields["quantity"] = f"{config.quantity.value} ({_tag(config.quantity.format)})"
    if config.exp_date is not None:
        fields["exp_date"] = f"{config.exp_date.value} ({_tag(config.exp_date.format)})"
    if config.manufacture_date is not None:
        fields["manufacture_date"] = config.manufacture_date
    return fields


def _tag(format: Any) -> str:
    return getattr(format, "value", format)


def format_udi_result(
    structure: Union[DataStructureType, str],
    config: SecondaryConfig,
    udi: str
) -> Dict[str, Any]:
    """
    Build the output dict of an encoded label.

    Returns:
        Dict with the data structure name, the UDI, its human-readable
        line, the check character (None when omitted), the link character
        for a linked secondary, and the input fields by readable name
    """
    structure = DataStructureType(structure)
    has_check = structure is DataStructureType.COMBINED or not config.no_check_char

    output: Dict[str, Any] = {
        "Data Structure": structure.value.capitalize(),
        "UDI": udi,
        "Human Readable": barcodify(udi),
        "Check Character": udi[-1] if has_check else None,
    }

    if structure is DataStructureType.SECONDARY and config.identity is not None:
        link_index = -2 if has_check else -1
        output["Link Character"] = udi[link_index]

    for name, value in _config_fields(config).items():
        if structure is DataStructureType.PRIMARY and name not in ("lic", "pcn", "unit_of_measure"):
            continue
        output[FIELD_NAMES[name]] = value

    return output


def encode_udi_to_dict(
    structure: Union[DataStructureType, str] = DataStructureType.COMBINED,
    options: Optional[EncodeOptions] = None,
    **fields: Any
) -> Dict[str, Any]:
    """
    Encode keyword fields and return the label as a dict.

    Args:
        structure: primary, secondary or combined
        options: Encoder policy
        **fields: Keyword fields as accepted by build_secondary_config

    Returns:
        Output dict (see format_udi_result)
    """
    config = build_secondary_config(**fields)
    udi = encode_data_structure(structure, config, options)
    return format_udi_result(structure, config, udi)


def encode_udi_to_json(
    structure: Union[DataStructureType, str] = DataStructureType.COMBINED,
    options: Optional[EncodeOptions] = None,
    indent: int = 2,
    **fields: Any
) -> str:
    """Encode keyword fields and return the label as a JSON string."""
    data = encode_udi_to_dict(structure, options, **fields)
    return json.dumps(data, indent=indent, ensure_ascii=False)


def check_char_to_dict(data: str) -> Dict[str, Any]:
    """Output dict for a bare check character computation."""
    check = generate_check_char(data)
    return {
        "Data": data,
        "Check Character": check,
        "Human Readable": barcodify(data + check) if data.startswith(HIBC_FLAG) else None,
    }
