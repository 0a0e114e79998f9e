"""Console report: sheet previews, per-sheet status lines and run totals."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Any

from openpyxl.worksheet.worksheet import Worksheet

from auto_insert.models import AppendResult, RunSummary
from auto_insert.pipeline import used_range

PREVIEW_MAX_ROWS = 10
PREVIEW_MAX_COLS = 10

_QUOTED_RE = re.compile(r'"[^"]*"')
_DECIMALS_RE = re.compile(r"\.([0#]+)")


# ── Cell text ────────────────────────────────────────────────────


def _format_number(value: int | float, number_format: str) -> str:
    section = _QUOTED_RE.sub("", (number_format or "General").split(";")[0])
    if section.strip().lower() in ("", "general", "@"):
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    match = _DECIMALS_RE.search(section)
    decimals = len(match.group(1)) if match else 0
    if "%" in section:
        return f"{value * 100:.{decimals}f}%"
    if "," in section:
        return f"{value:,.{decimals}f}"
    return f"{value:.{decimals}f}"


def format_value(value: Any, number_format: str = "General") -> str:
    """Return the display text of a cell value under *number_format*."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, datetime):
        if value.time() == time(0):
            return value.date().isoformat()
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return str(value)
    if isinstance(value, (int, float)):
        return _format_number(value, number_format)
    return str(value)


def format_cell_text(ws: Worksheet, row: int, column: int) -> str:
    cell = ws.cell(row=row, column=column)
    return format_value(cell.value, cell.number_format)


# ── Preview ──────────────────────────────────────────────────────


def preview_lines(
    label: str,
    ws: Worksheet,
    max_rows: int = PREVIEW_MAX_ROWS,
    max_cols: int = PREVIEW_MAX_COLS,
) -> list[str]:
    """Header line plus up to *max_rows* tab-separated lines of the used range."""
    bounds = used_range(ws)
    if bounds is None:
        return [f"{label}: '{ws.title}' is empty."]

    lines = [
        f"{label}: '{ws.title}' used range = "
        f"{bounds.row_count} rows x {bounds.col_count} cols"
    ]
    last_row = min(bounds.last_row, bounds.first_row + max_rows - 1)
    last_col = min(bounds.last_col, bounds.first_col + max_cols - 1)
    for r in range(bounds.first_row, last_row + 1):
        lines.append(
            "\t".join(
                format_cell_text(ws, r, c) for c in range(bounds.first_col, last_col + 1)
            )
        )
    return lines


# ── Status + totals ──────────────────────────────────────────────


def status_line(result: AppendResult) -> str:
    if result.inserted:
        note = ", col C skipped + scooted left" if result.skip_column_c else ""
        status = f"inserted (from row {result.source_row}{note})"
    else:
        status = f"skipped (row {result.source_row} empty)"
    return f"  {result.sheet_name}: {status}"


def summary_lines(summary: RunSummary) -> list[str]:
    lines: list[str] = []
    if summary.output_path is not None:
        lines.append(f"Saved updated connected workbook: {summary.output_path}")
    lines.append(f"Rows inserted: {summary.inserted_total}/{summary.sheet_count}")
    return lines
