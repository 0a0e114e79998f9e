"""Bind sheet selectors (1-based index or case-insensitive name) to worksheets."""

from __future__ import annotations

from collections.abc import Sequence

from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from auto_insert import DEFAULT_SHEET_SELECTORS, SHEETS_PER_FILE


def resolve_sheet(wb: Workbook, selector: str | None) -> Worksheet:
    """Return the worksheet named or numbered by *selector*.

    A blank selector picks the first sheet.

    Raises
    ------
    ValueError
        If the index is out of range or no sheet has that name.
    """
    sheets = wb.worksheets
    if selector is None or not selector.strip():
        if not sheets:
            raise ValueError("Workbook has no worksheets")
        return sheets[0]

    token = selector.strip()
    if token.lstrip("+-").isdigit():
        index = int(token)
        if index < 1 or index > len(sheets):
            raise ValueError(
                f"Worksheet index {index} is out of range (1..{len(sheets)})."
            )
        return sheets[index - 1]

    wanted = selector.casefold()
    for ws in sheets:
        if ws.title.casefold() == wanted:
            return ws
    raise ValueError(f"Worksheet not found: '{selector}'")


def bind_sheets(
    wb: Workbook,
    selectors: Sequence[str] | None = None,
    defaults: Sequence[str] = DEFAULT_SHEET_SELECTORS,
) -> list[Worksheet]:
    """Resolve exactly five selectors; ``None`` or empty falls back to *defaults*."""
    if selectors:
        if len(selectors) != SHEETS_PER_FILE:
            raise ValueError(
                f"Expected exactly {SHEETS_PER_FILE} sheet selectors, got {len(selectors)}."
            )
        chosen = list(selectors)
    else:
        if len(defaults) != SHEETS_PER_FILE:
            raise ValueError(
                f"Default sheet selector list must contain exactly {SHEETS_PER_FILE} items."
            )
        chosen = list(defaults)
    return [resolve_sheet(wb, selector) for selector in chosen]
