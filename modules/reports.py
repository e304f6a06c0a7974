"""
Label export utilities (CSV/Excel/PDF).
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import inch
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas


EXPORTS_DIR = Path(__file__).resolve().parent.parent / "exports"

MONO_COLUMNS = ("udi", "human_readable")
CELL_PADDING = 6
FONT_SIZE = 8.5


def ensure_exports_dir(exports_dir: Optional[Path] = None) -> Path:
    target = exports_dir or EXPORTS_DIR
    target.mkdir(parents=True, exist_ok=True)
    return target


def to_dataframe(labels: List[Dict[str, str]]) -> pd.DataFrame:
    return pd.DataFrame(labels)


def export_csv(df: pd.DataFrame, filename: str, exports_dir: Optional[Path] = None) -> Path:
    path = ensure_exports_dir(exports_dir) / filename
    df.to_csv(path, index=False)
    return path


def export_excel_single(
    df: pd.DataFrame,
    filename: str,
    sheet_name: str = "Labels",
    exports_dir: Optional[Path] = None,
) -> Path:
    path = ensure_exports_dir(exports_dir) / filename
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)
    return path


def _column_font(col: str) -> str:
    return "Courier" if col in MONO_COLUMNS else "Helvetica"


def _compute_col_widths(df: pd.DataFrame, width: float) -> List[float]:
    """
    Column widths from the rendered text of the header and first rows.

    UDI columns keep the width of their longest value so an encoded label is
    never cut; the other columns share what is left, scaled down together.
    Falls back to scaling every column when the UDI columns alone overflow.
    """
    col_names = list(df.columns)
    if not col_names:
        return []
    sample = df.head(50)
    natural = []
    for col in col_names:
        texts = [str(col)] + ["" if v is None else str(v) for v in sample[col].tolist()]
        font = _column_font(col)
        natural.append(max(stringWidth(t, font, FONT_SIZE) for t in texts) + CELL_PADDING)

    mono = sum(w for col, w in zip(col_names, natural) if col in MONO_COLUMNS)
    rest = sum(natural) - mono
    if mono < width and rest:
        scale = (width - mono) / rest
        return [w if col in MONO_COLUMNS else w * scale for col, w in zip(col_names, natural)]
    scale = width / sum(natural)
    return [w * scale for w in natural]


def _fit_text(text: str, font: str, col_width: float) -> str:
    """Cut text with "..." until it fits the column."""
    limit = col_width - CELL_PADDING
    if stringWidth(text, font, FONT_SIZE) <= limit:
        return text
    while text and stringWidth(text + "...", font, FONT_SIZE) > limit:
        text = text[:-1]
    return text + "..."


def _draw_footer(c: canvas.Canvas, page_width: float, footer_left: str) -> None:
    y = 0.35 * inch
    c.setFont("Helvetica-Oblique", 8)
    c.drawString(0.5 * inch, y, footer_left)
    c.drawRightString(page_width - 0.5 * inch, y, f"Page {c.getPageNumber()}")


def _draw_table(
    c: canvas.Canvas,
    df: pd.DataFrame,
    x: float,
    y: float,
    width: float,
    min_y: float,
    page_size: tuple,
    footer_text: str,
) -> float:
    if df.empty:
        c.setFont("Helvetica-Oblique", 9)
        c.drawString(x, y, "No data available.")
        return y - 0.25 * inch

    page_width, page_height = page_size
    col_names = list(df.columns)
    col_widths = _compute_col_widths(df, width)
    row_height = 0.22 * inch

    def draw_row(values, y_pos, bold=False):
        x_pos = x
        for idx, v in enumerate(values):
            font = _column_font(col_names[idx])
            if bold:
                font += "-Bold"
            text = _fit_text(str(v) if v is not None else "", font, col_widths[idx])
            c.setFont(font, FONT_SIZE)
            c.drawString(x_pos, y_pos, text)
            x_pos += col_widths[idx]

    def draw_header(y_pos):
        c.setFillGray(0.9)
        c.rect(x, y_pos - 0.02 * inch, width, row_height, fill=1, stroke=0)
        c.setFillGray(0)
        draw_row(col_names, y_pos, bold=True)
        c.line(x, y_pos - 0.04 * inch, x + width, y_pos - 0.04 * inch)

    draw_header(y)
    y -= row_height

    row_index = 0
    for _, row in df.iterrows():
        if row_index % 2 == 1:
            c.setFillGray(0.97)
            c.rect(x, y - 0.02 * inch, width, row_height, fill=1, stroke=0)
            c.setFillGray(0)
        draw_row(row.tolist(), y)
        y -= row_height
        if y < min_y:
            _draw_footer(c, page_width, footer_text)
            c.showPage()
            y = page_height - 0.5 * inch
            draw_header(y)
            y -= row_height
        row_index += 1
    return y


def export_pdf(
    report_title: str,
    df: pd.DataFrame,
    filename: str,
    exports_dir: Optional[Path] = None,
) -> Path:
    """Tabular listing of encoded labels, the same footer on every page."""
    path = ensure_exports_dir(exports_dir) / filename
    page_size = landscape(A4)
    c = canvas.Canvas(str(path), pagesize=page_size)
    width, height = page_size
    x = 0.5 * inch
    y = height - 0.5 * inch
    footer = f"{report_title} | Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}"

    c.setFont("Helvetica-Bold", 16)
    c.drawString(x, y, report_title)
    y -= 0.3 * inch
    _draw_table(c, df, x, y, width - inch, 0.5 * inch, page_size, footer)
    _draw_footer(c, width, footer)
    c.save()
    return path


def export_label_sheet(
    df: pd.DataFrame,
    filename: str,
    columns: int = 3,
    exports_dir: Optional[Path] = None,
) -> Path:
    """
    Sheet of label cells showing the human-readable UDI line and its
    product fields, for proofing before the barcodes are printed.
    Rows without a UDI are skipped.
    """
    path = ensure_exports_dir(exports_dir) / filename
    c = canvas.Canvas(str(path), pagesize=A4)
    width, height = A4
    margin = 0.5 * inch
    cell_width = (width - 2 * margin) / columns
    cell_height = 1.0 * inch

    labels = df[df["udi"] != ""] if "udi" in df.columns else df.iloc[0:0]
    x_index = 0
    y = height - margin - cell_height
    for _, row in labels.iterrows():
        x = margin + x_index * cell_width
        c.rect(x, y, cell_width - 4, cell_height - 4, fill=0, stroke=1)
        c.setFont("Courier-Bold", 9)
        c.drawString(x + 6, y + cell_height - 22, str(row["human_readable"]))
        c.setFont("Helvetica", 7.5)
        details = [
            f"LIC {row.get('lic', '')}  PCN {row.get('pcn', '')}",
            f"LOT {row.get('lot', '')}  SN {row.get('sn', '')}",
            f"EXP {row.get('exp_date', '')}",
        ]
        for offset, line in enumerate(details):
            c.drawString(x + 6, y + cell_height - 38 - offset * 11, line)

        x_index += 1
        if x_index == columns:
            x_index = 0
            y -= cell_height
            if y < margin:
                c.showPage()
                y = height - margin - cell_height

    if labels.empty:
        c.setFont("Helvetica-Oblique", 9)
        c.drawString(margin, height - margin, "No labels available.")
    c.save()
    return path
