"""Pick the summary row of each source sheet and append it to the master sheet."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from openpyxl.worksheet.worksheet import Worksheet

from auto_insert.models import AppendResult, MappedCell, RowMapping, SheetLayout, UsedRange
from auto_insert.utils import is_blank

# ── Sheet layout convention ──────────────────────────────────────

# First matching rule wins; keywords are matched as case-insensitive substrings.
SHEET_LAYOUT_RULES: tuple[tuple[tuple[str, ...], SheetLayout], ...] = (
    (("DELFOR", "ORDERS"), SheetLayout(source_row=17, skip_column_c=True)),
)
DEFAULT_LAYOUT = SheetLayout(source_row=7, skip_column_c=False)

SKIPPED_COLUMN = 3  # column C


def sheet_layout(sheet_name: str) -> SheetLayout:
    """Return the summary-row layout for a source sheet called *sheet_name*."""
    folded = sheet_name.casefold()
    for keywords, layout in SHEET_LAYOUT_RULES:
        if any(keyword.casefold() in folded for keyword in keywords):
            return layout
    return DEFAULT_LAYOUT


def source_row_for_sheet(sheet_name: str) -> int:
    return sheet_layout(sheet_name).source_row


def should_skip_column_c(sheet_name: str) -> bool:
    return sheet_layout(sheet_name).skip_column_c


# ── Used range ───────────────────────────────────────────────────


def used_range(ws: Worksheet) -> UsedRange | None:
    """Return the bounds of every non-empty cell in *ws*, or None if it has none.

    Only values count; cells carrying nothing but a style are ignored.
    """
    first_row = first_col = last_row = last_col = 0
    for r_idx, row in enumerate(ws.iter_rows(values_only=True), 1):
        for c_idx, value in enumerate(row, 1):
            if is_blank(value):
                continue
            if not first_row:
                first_row = r_idx
            last_row = r_idx
            first_col = c_idx if not first_col else min(first_col, c_idx)
            last_col = max(last_col, c_idx)
    if not last_row:
        return None
    return UsedRange(first_row=first_row, first_col=first_col, last_row=last_row, last_col=last_col)


def last_used_row(ws: Worksheet) -> int:
    bounds = used_range(ws)
    return bounds.last_row if bounds else 0


def cell_value(ws: Worksheet, row: int, column: int) -> Any:
    """Read a value without materialising cells beyond the sheet's dimensions."""
    if row > ws.max_row or column > ws.max_column:
        return None
    return ws.cell(row=row, column=column).value


def _write_value(ws: Worksheet, row: int, column: int, value: Any) -> None:
    cell = ws.cell(row=row, column=column)
    cell.value = value
    # Copied text that happens to start with "=" stays text.
    if isinstance(value, str) and value.startswith("="):
        cell.data_type = "s"


# ── Mapping ──────────────────────────────────────────────────────


def build_row_mapping(
    source: Worksheet, source_row: int, skip_column_c: bool
) -> RowMapping | None:
    """Translate *source_row* into destination columns.

    When *skip_column_c* is set and the used range reaches column C, column C is
    left out and every later column lands one position to the left. Returns None
    when the source sheet is empty.
    """
    bounds = used_range(source)
    if bounds is None:
        return None

    scoot = skip_column_c and bounds.last_col >= SKIPPED_COLUMN
    mapping = RowMapping(source_row=source_row, scooted=scoot, source_last_col=bounds.last_col)
    for col in range(bounds.first_col, bounds.last_col + 1):
        if scoot and col == SKIPPED_COLUMN:
            continue
        dest_col = col - 1 if scoot and col > SKIPPED_COLUMN else col
        mapping.cells.append(MappedCell(column=dest_col, value=cell_value(source, source_row, col)))
    return mapping


def append_row_values(
    source: Worksheet,
    destination: Worksheet,
    source_row: int,
    skip_column_c: bool,
) -> AppendResult:
    """Append one mapped source row below the destination's used range."""
    result = AppendResult(
        sheet_name=destination.title,
        source_row=source_row,
        skip_column_c=skip_column_c,
    )
    mapping = build_row_mapping(source, source_row, skip_column_c)
    if mapping is None or not mapping.has_values:
        return result

    dest_row = last_used_row(destination) + 1
    for cell in mapping.cells:
        _write_value(destination, dest_row, cell.column, cell.value)

    if mapping.scooted:
        if SKIPPED_COLUMN not in mapping.columns():
            _write_value(destination, dest_row, SKIPPED_COLUMN, None)
        # Values shifted left; the old last column must not keep data.
        _write_value(destination, dest_row, mapping.source_last_col, None)

    result.inserted = 1
    result.destination_row = dest_row
    return result


def append_sheet_pairs(
    sources: Sequence[Worksheet], destinations: Sequence[Worksheet]
) -> list[AppendResult]:
    """Run :func:`append_row_values` over matching sheet pairs, in order."""
    if len(sources) != len(destinations):
        raise ValueError(
            f"Sheet pair mismatch: {len(sources)} source vs {len(destinations)} destination sheets"
        )
    results: list[AppendResult] = []
    for source, destination in zip(sources, destinations):
        layout = sheet_layout(source.title)
        results.append(
            append_row_values(source, destination, layout.source_row, layout.skip_column_c)
        )
    return results
