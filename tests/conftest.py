from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from openpyxl import Workbook

from auto_insert import DEFAULT_SHEET_SELECTORS

SheetRows = dict[int, list[Any]]
HEADER = ["Date", "Partner", "Channel", "Sent", "Received"]


def _fill(wb: Workbook, sheets: dict[str, SheetRows]) -> Workbook:
    for name, rows in sheets.items():
        ws = wb.create_sheet(title=name)
        for row_idx, values in rows.items():
            for col_idx, value in enumerate(values, 1):
                if value is not None:
                    ws.cell(row=row_idx, column=col_idx, value=value)
    return wb


@pytest.fixture
def make_workbook() -> Callable[[dict[str, SheetRows]], Workbook]:
    """Build an in-memory workbook from ``{sheet: {row: [values]}}``."""

    def _make(sheets: dict[str, SheetRows]) -> Workbook:
        wb = Workbook()
        active = wb.active
        if active is not None:
            wb.remove(active)
        return _fill(wb, sheets)

    return _make


@pytest.fixture
def save_workbook_file(
    tmp_path: Path, make_workbook: Callable[[dict[str, SheetRows]], Workbook]
) -> Callable[[str, dict[str, SheetRows]], Path]:
    """Write a workbook built by ``make_workbook`` to ``tmp_path / name``."""

    def _save(name: str, sheets: dict[str, SheetRows]) -> Path:
        path = tmp_path / name
        make_workbook(sheets).save(path)
        return path

    return _save


def daily_sheets() -> dict[str, SheetRows]:
    """Daily export: DELFOR/ORDERS carry their summary on row 17, the rest on row 7."""
    return {
        "Cover": {1: ["EDI daily stats"]},
        "DELFOR Summary": {
            1: HEADER,
            17: ["2024-05-01", "ACME", "AS2", 10, 12],
        },
        "ORDERS Summary": {
            1: HEADER,
            17: ["2024-05-01", "Globex", "SFTP", 3, 4],
        },
        "DESADV Summary": {
            1: HEADER,
            7: ["2024-05-01", "Initech", "VAN", 5, 6],
        },
        "INVOIC Summary": {
            1: HEADER,
        },
        "ORDRSP Summary": {
            1: HEADER,
            7: ["2024-05-01", "Umbrella", "AS2", 7, 8],
        },
    }


def master_sheets() -> dict[str, SheetRows]:
    """Master workbook: column C is already gone from the DELFOR/ORDERS history."""
    short_header = ["Date", "Partner", "Sent", "Received"]
    return {
        "DELFOR Summary": {
            1: short_header,
            2: ["2024-04-29", "ACME", 8, 9],
            3: ["2024-04-30", "ACME", 9, 9],
        },
        "ORDERS Summary": {
            1: short_header,
            2: ["2024-04-30", "Globex", 1, 1],
        },
        "DESADV Summary": {1: HEADER, 2: ["2024-04-30", "Initech", "VAN", 4, 4]},
        "INVOIC Summary": {1: HEADER, 2: ["2024-04-30", "Hooli", "VAN", 2, 2]},
        "ORDRSP Summary": {1: HEADER},
    }


@pytest.fixture
def workbook_pair(
    save_workbook_file: Callable[[str, dict[str, SheetRows]], Path],
) -> tuple[Path, Path]:
    """Daily export + master workbook on disk, using the default sheet names."""
    assert set(DEFAULT_SHEET_SELECTORS) <= set(daily_sheets())
    daily = save_workbook_file("2024_05_01 Stats - converted.xlsx", daily_sheets())
    master = save_workbook_file("master.xlsx", master_sheets())
    return daily, master
