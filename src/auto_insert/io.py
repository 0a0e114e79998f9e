"""I/O helpers — open the two workbooks, pick the output path, save atomically."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from auto_insert.utils import local_stamp

_VBA_SUFFIXES = (".xlsm", ".xltm")

# ── Loading ──────────────────────────────────────────────────────


def check_inputs_exist(*paths: Path) -> None:
    """Fail on the first path that is not an existing file.

    Raises
    ------
    FileNotFoundError
        If a path is missing or is a directory.
    """
    for path in paths:
        if not Path(path).is_file():
            raise FileNotFoundError(f"File not found: {path}")


def open_workbook(path: Path, *, data_only: bool = False) -> Workbook:
    """Load *path* with openpyxl.

    ``data_only=True`` returns cached values for formula cells; use it for the
    workbook that is only read from.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ValueError
        If the file cannot be opened or parsed as a workbook.
    """
    path = Path(path)
    check_inputs_exist(path)
    keep_vba = path.suffix.lower() in _VBA_SUFFIXES
    try:
        return load_workbook(path, data_only=data_only, keep_vba=keep_vba)
    except (InvalidFileException, BadZipFile, KeyError, OSError) as exc:
        raise ValueError(f"Could not open workbook {path}: {exc}") from exc


# ── Writing ──────────────────────────────────────────────────────


def updated_copy_path(path: Path, now: datetime | None = None) -> Path:
    """Return a non-existing ``<stem>_updated<ext>`` sibling of *path*.

    Falls back to ``<stem>_updated_<yyyyMMdd_HHmmss><ext>`` and then to a numeric
    suffix when two runs land in the same second.
    """
    path = Path(path)
    candidate = path.with_name(f"{path.stem}_updated{path.suffix}")
    if not candidate.exists():
        return candidate

    base = f"{path.stem}_updated_{local_stamp(now)}"
    candidate = path.with_name(f"{base}{path.suffix}")
    counter = 2
    while candidate.exists():
        candidate = path.with_name(f"{base}_{counter}{path.suffix}")
        counter += 1
    return candidate


def save_workbook(wb: Workbook, path: Path) -> Path:
    """Save *wb* to *path* through a temporary sibling and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f"{path.stem}.tmp{path.suffix}")
    try:
        wb.save(tmp_path)
        tmp_path.replace(path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise
    return path
