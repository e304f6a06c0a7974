"""
Batch label encoding for tables of label rows.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd

from hibc_udi import (
    DataStructureType,
    EncodeOptions,
    HIBCError,
    SecondaryConfig,
    barcodify,
    build_secondary_config,
    encode_data_structure,
)

from .utils import safe_get


logger = logging.getLogger(__name__)

BATCH_COLUMNS = [
    "lic",
    "pcn",
    "unit_of_measure",
    "lot",
    "sn",
    "quantity",
    "quantity_format",
    "exp_date",
    "exp_date_format",
    "manufacture_date",
]

OUTPUT_COLUMNS = ["udi", "human_readable", "error"]


def load_batch_csv(path: Union[str, Path]) -> pd.DataFrame:
    """Read a label table keeping every cell as text (leading zeros matter)."""
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [str(c).strip().lower() for c in df.columns]
    return df


def empty_batch() -> pd.DataFrame:
    return pd.DataFrame(columns=BATCH_COLUMNS)


def row_to_config(row: Dict[str, Any], no_check_char: bool = False) -> SecondaryConfig:
    """Build the label config of one row. Blank cells are absent fields."""
    quantity = None
    if safe_get(row, "quantity") is not None:
        quantity = {
            "format": safe_get(row, "quantity_format", "QQ"),
            "value": safe_get(row, "quantity"),
        }
    exp_date = None
    if safe_get(row, "exp_date") is not None:
        exp_date = {
            "format": safe_get(row, "exp_date_format", "YYMMDD"),
            "value": safe_get(row, "exp_date"),
        }
    return build_secondary_config(
        lic=safe_get(row, "lic"),
        pcn=safe_get(row, "pcn"),
        unit_of_measure=safe_get(row, "unit_of_measure"),
        lot=safe_get(row, "lot"),
        sn=safe_get(row, "sn"),
        quantity=quantity,
        exp_date=exp_date,
        manufacture_date=safe_get(row, "manufacture_date"),
        no_check_char=no_check_char,
    )


def encode_batch(
    df: pd.DataFrame,
    structure: Union[DataStructureType, str] = DataStructureType.COMBINED,
    options: Optional[EncodeOptions] = None,
    no_check_char: bool = False,
) -> pd.DataFrame:
    """
    Encode every row of a label table.

    Returns:
        Copy of df with udi, human_readable and error columns. A row that
        fails keeps its error message and empty outputs; the other rows are
        still encoded.
    """
    structure = DataStructureType(structure)
    results: List[Dict[str, str]] = []
    for index, row in df.iterrows():
        try:
            udi = encode_data_structure(structure, row_to_config(row.to_dict(), no_check_char), options)
            results.append({"udi": udi, "human_readable": barcodify(udi), "error": ""})
        except HIBCError as exc:
            logger.debug("Row %s rejected: %s", index, exc)
            results.append({"udi": "", "human_readable": "", "error": str(exc)})

    out = df.copy()
    encoded = pd.DataFrame(results, columns=OUTPUT_COLUMNS, index=df.index)
    for col in OUTPUT_COLUMNS:
        out[col] = encoded[col]
    failed = int((out["error"] != "").sum())
    if failed:
        logger.warning("%d of %d label rows could not be encoded", failed, len(out))
    return out


def batch_summary(encoded: pd.DataFrame) -> Dict[str, int]:
    total = len(encoded)
    failed = int((encoded["error"] != "").sum()) if total else 0
    return {"rows": total, "encoded": total - failed, "failed": failed}
