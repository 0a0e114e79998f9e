"""auto-insert — Append the daily EDI summary rows into the master workbook."""

__version__ = "0.2.0"

SHEETS_PER_FILE = 5

DEFAULT_SHEET_SELECTORS: list[str] = [
    "DELFOR Summary",
    "ORDERS Summary",
    "DESADV Summary",
    "INVOIC Summary",
    "ORDRSP Summary",
]
