"""
Core encoding modules for the HIBC UDI encoder.
"""

from .mod43 import MOD43_TABLE, to_mod43, from_mod43
from .check_char import generate_check_char, verify_check_char
from .data_structure import (
    DataStructureType,
    EncodeOptions,
    ExpirationDate,
    PrimaryConfig,
    Quantity,
    SecondaryConfig,
    build_secondary_config,
    create_combined_data_structure,
    create_primary_data_structure,
    create_secondary_data_structure,
    encode_combined,
    encode_data_structure,
    encode_primary,
    encode_secondary,
)

__all__ = [
    "MOD43_TABLE",
    "to_mod43",
    "from_mod43",
    "generate_check_char",
    "verify_check_char",
    "DataStructureType",
    "EncodeOptions",
    "ExpirationDate",
    "PrimaryConfig",
    "Quantity",
    "SecondaryConfig",
    "build_secondary_config",
    "create_combined_data_structure",
    "create_primary_data_structure",
    "create_secondary_data_structure",
    "encode_combined",
    "encode_data_structure",
    "encode_primary",
    "encode_secondary",
]
