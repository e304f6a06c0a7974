"""
Label generator settings, held for the browser session.
"""

from __future__ import annotations

from typing import Any, Dict

import streamlit as st

from hibc_udi import EncodeOptions


DEFAULT_SETTINGS: Dict[str, Any] = {
    "default_structure": "combined",
    "strict_lic": True,
    "strict_dates": False,
    "append_check_char": True,
    "default_shelf_life_months": 24,
    "label_sheet_columns": 3,
    "display_mode": "Light",
}


def load_settings() -> Dict[str, Any]:
    if "settings" not in st.session_state:
        st.session_state.settings = dict(DEFAULT_SETTINGS)
    return st.session_state.settings


def save_settings(updates: Dict[str, Any]) -> None:
    settings = load_settings()
    for key, value in updates.items():
        if key in DEFAULT_SETTINGS:
            settings[key] = value


def encode_options(settings: Dict[str, Any]) -> EncodeOptions:
    return EncodeOptions(
        strict_lic=bool(settings["strict_lic"]),
        strict_dates=bool(settings["strict_dates"]),
    )
