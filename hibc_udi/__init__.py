"""
HIBC UDI Encoder

Encodes Unique Device Identification (UDI) strings per the HIBC Supplier
Labeling Standard (ANSI/HIBC 2.5 - 2015): primary, secondary and combined
data structures with their Modulo-43 check characters, ready to be handed
to a barcode renderer.
"""

from .core.mod43 import MOD43_TABLE, to_mod43, from_mod43
from .core.check_char import generate_check_char, verify_check_char
from .core.data_structure import (
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
from .errors import (
    ErrorCode,
    HIBCError,
    IndexOutOfRangeError,
    InvalidRangeError,
    InvalidSymbolError,
    MutualExclusionError,
    ValidationError,
)
from .formats import DateFormat, FieldFlag, QuantityFormat
from .formatters.fields import barcodify
from .json_formatter import encode_udi_to_dict, encode_udi_to_json

__version__ = "1.0.0"
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
    "ErrorCode",
    "HIBCError",
    "IndexOutOfRangeError",
    "InvalidRangeError",
    "InvalidSymbolError",
    "MutualExclusionError",
    "ValidationError",
    "DateFormat",
    "FieldFlag",
    "QuantityFormat",
    "barcodify",
    "encode_udi_to_dict",
    "encode_udi_to_json",
]
