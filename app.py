import json
from datetime import date, datetime

import streamlit as st

from hibc_udi import (
    DataStructureType,
    DateFormat,
    HIBCError,
    QuantityFormat,
    barcodify,
    generate_check_char,
    verify_check_char,
)
from hibc_udi.json_formatter import encode_udi_to_dict
from modules.batch import BATCH_COLUMNS, batch_summary, empty_batch, encode_batch, load_batch_csv
from modules.reports import export_excel_single, export_label_sheet, export_pdf
from modules.settings import DEFAULT_SETTINGS, encode_options, load_settings, save_settings
from modules.utils import expiry_from_shelf_life, format_date_for


STRUCTURES = [s.value for s in DataStructureType]


def _timestamp() -> str:
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_session_state():
    if "last_label" not in st.session_state:
        st.session_state.last_label = None
    if "batch_result" not in st.session_state:
        st.session_state.batch_result = None


def _render_label_card(label: dict):
    if not label:
        return
    st.subheader(f"{label['Data Structure']} Data Structure")
    st.code(label["UDI"], language=None)
    st.markdown(f"**Human readable:** `{label['Human Readable']}`")
    cols = st.columns(2)
    cols[0].metric("Check Character", repr(label["Check Character"]) if label["Check Character"] is not None else "-")
    if "Link Character" in label:
        cols[1].metric("Link Character", repr(label["Link Character"]))
    with st.expander("JSON"):
        st.code(json.dumps(label, indent=2, ensure_ascii=False), language="json")


def _single_label_page(settings: dict):
    st.header("Single Label")

    structure = st.radio(
        "Data Structure",
        STRUCTURES,
        index=STRUCTURES.index(settings["default_structure"]),
        horizontal=True,
    )

    with st.form("label_form"):
        cols = st.columns(3)
        lic = cols[0].text_input("LIC", max_chars=4, help="Labeler Identification Code")
        pcn = cols[1].text_input("PCN", max_chars=18, help="Product or Catalog Number")
        uom = cols[2].number_input("Unit of Measure", min_value=0, max_value=9, step=1, value=0)

        if structure != DataStructureType.PRIMARY.value:
            cols = st.columns(2)
            lot = cols[0].text_input("Lot/Batch", max_chars=18)
            sn = cols[1].text_input("Serial Number", max_chars=18)

            cols = st.columns(2)
            qty = cols[0].text_input("Quantity (optional)")
            qty_format = cols[1].selectbox("Quantity Format", [f.value for f in QuantityFormat])

            cols = st.columns(3)
            use_exp = cols[0].checkbox("Expiration Date")
            exp_value = cols[1].date_input("Expires", value=date.today())
            exp_format = cols[2].selectbox(
                "Date Format",
                [f.value for f in DateFormat],
                index=[f.value for f in DateFormat].index(DateFormat.YYMMDD.value),
            )

            cols = st.columns(3)
            use_mfg = cols[0].checkbox("Manufacture Date")
            mfg_value = cols[1].date_input("Manufactured", value=date.today())
            derive_exp = cols[2].checkbox(
                f"Expiry from shelf life ({settings['default_shelf_life_months']} months)"
            )
        submitted = st.form_submit_button("Encode")

    if not submitted:
        _render_label_card(st.session_state.last_label)
        return

    fields = {
        "lic": lic or None,
        "pcn": pcn or None,
        "unit_of_measure": int(uom),
        "no_check_char": not settings["append_check_char"],
    }
    if structure != DataStructureType.PRIMARY.value:
        mfg = format_date_for(mfg_value, DateFormat.YYYYMMDD) if use_mfg else None
        exp = format_date_for(exp_value, exp_format) if use_exp else None
        if derive_exp and mfg:
            exp_format = DateFormat.YYYYMMDD.value
            exp = expiry_from_shelf_life(mfg, int(settings["default_shelf_life_months"]))
        fields.update(
            lot=lot or None,
            sn=sn or None,
            quantity={"format": qty_format, "value": qty} if qty else None,
            exp_date={"format": exp_format, "value": exp} if exp else None,
            manufacture_date=mfg,
        )
        if structure == DataStructureType.SECONDARY.value and not (lic or pcn):
            fields.update(lic=None, pcn=None, unit_of_measure=None)

    try:
        label = encode_udi_to_dict(structure, encode_options(settings), **fields)
    except HIBCError as exc:
        st.session_state.last_label = None
        st.error(str(exc))
        return

    st.session_state.last_label = label
    _render_label_card(label)


def _batch_page(settings: dict):
    st.header("Batch Labels")
    st.caption("CSV columns: " + ", ".join(BATCH_COLUMNS))

    template = empty_batch().to_csv(index=False).encode("utf-8")
    st.download_button("Download CSV template", template, file_name="labels_template.csv", mime="text/csv")

    structure = st.selectbox(
        "Data Structure",
        STRUCTURES,
        index=STRUCTURES.index(settings["default_structure"]),
    )
    uploaded = st.file_uploader("Label table (CSV)", type=["csv"])
    if uploaded is not None and st.button("Encode Batch"):
        df = load_batch_csv(uploaded)
        st.session_state.batch_result = encode_batch(
            df,
            structure,
            encode_options(settings),
            no_check_char=not settings["append_check_char"],
        )

    result = st.session_state.batch_result
    if result is None:
        return

    summary = batch_summary(result)
    cols = st.columns(3)
    cols[0].metric("Rows", summary["rows"])
    cols[1].metric("Encoded", summary["encoded"])
    cols[2].metric("Failed", summary["failed"])
    if summary["failed"]:
        st.warning("Some rows could not be encoded; see the error column.")

    st.dataframe(result, use_container_width=True)

    stamp = _timestamp()
    cols = st.columns(4)
    cols[0].download_button(
        "CSV",
        result.to_csv(index=False).encode("utf-8"),
        file_name=f"labels_{stamp}.csv",
        mime="text/csv",
    )
    excel_path = export_excel_single(result, f"labels_{stamp}.xlsx")
    cols[1].download_button("Excel", excel_path.read_bytes(), file_name=excel_path.name)
    pdf_path = export_pdf("HIBC UDI Labels", result, f"labels_{stamp}.pdf")
    cols[2].download_button("PDF listing", pdf_path.read_bytes(), file_name=pdf_path.name)
    sheet_path = export_label_sheet(
        result, f"label_sheet_{stamp}.pdf", columns=int(settings["label_sheet_columns"])
    )
    cols[3].download_button("Label sheet", sheet_path.read_bytes(), file_name=sheet_path.name)


def _check_char_page():
    st.header("Check Character")
    data = st.text_input("Data", placeholder="+A123BJC5D6E71")
    verify = st.checkbox("Last character is the check character (verify)")
    if not data:
        return
    try:
        if verify:
            if verify_check_char(data):
                st.success(f"Valid: {barcodify(data)}")
            else:
                st.error(f"Invalid: expected {generate_check_char(data[:-1])!r}")
        else:
            check = generate_check_char(data)
            st.metric("Check Character", repr(check))
            st.code(data + check, language=None)
    except HIBCError as exc:
        st.error(str(exc))


def _settings_page():
    st.header("Settings")
    settings = load_settings()
    with st.form("settings_form"):
        default_structure = st.selectbox(
            "Default data structure", STRUCTURES, index=STRUCTURES.index(settings["default_structure"])
        )
        strict_lic = st.checkbox("LIC must start with a letter", value=bool(settings["strict_lic"]))
        strict_dates = st.checkbox("Reject non-calendar dates", value=bool(settings["strict_dates"]))
        append_check = st.checkbox("Append check character", value=bool(settings["append_check_char"]))
        shelf_life = st.number_input(
            "Default shelf life (months)", min_value=1, step=1, value=int(settings["default_shelf_life_months"])
        )
        sheet_columns = st.number_input(
            "Label sheet columns", min_value=1, max_value=5, step=1, value=int(settings["label_sheet_columns"])
        )
        display_mode = st.selectbox("Display mode", ["Light", "Dark"], index=0 if settings["display_mode"] == "Light" else 1)
        saved = st.form_submit_button("Save Settings")

    if saved:
        save_settings(
            {
                "default_structure": default_structure,
                "strict_lic": strict_lic,
                "strict_dates": strict_dates,
                "append_check_char": append_check,
                "default_shelf_life_months": shelf_life,
                "label_sheet_columns": sheet_columns,
                "display_mode": display_mode,
            }
        )
        st.success("Settings saved.")
    if st.button("Reset to defaults"):
        save_settings(DEFAULT_SETTINGS)
        st.rerun()


def _apply_display_mode(settings: dict) -> None:
    if settings.get("display_mode") != "Dark":
        return
    st.markdown(
        """
        <style>
        :root, body, [data-testid="stAppViewContainer"] {
            background-color: #0f1115 !important;
            color: #e6e6e6 !important;
        }
        [data-testid="stSidebar"] {
            background-color: #141821 !important;
        }
        .stButton button, .stTextInput input, .stTextArea textarea, .stSelectbox div {
            color: #e6e6e6 !important;
            background-color: #1c2230 !important;
            border-color: #2a3244 !important;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def main():
    _ensure_session_state()
    settings = load_settings()
    _apply_display_mode(settings)

    st.sidebar.title("Navigation")
    page = st.sidebar.radio(
        "Go to",
        [
            "Single Label",
            "Batch Labels",
            "Check Character",
            "Settings",
        ],
    )

    if page == "Single Label":
        _single_label_page(settings)
    elif page == "Batch Labels":
        _batch_page(settings)
    elif page == "Check Character":
        _check_char_page()
    elif page == "Settings":
        _settings_page()


st.set_page_config(page_title="HIBC UDI Label Generator", layout="wide")

if __name__ == "__main__":
    main()
