"""Data models shared across the package."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral
from pathlib import Path
from typing import Any

from auto_insert.utils import is_blank


def _to_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{field_name} must be an integer")
    result = int(value)
    if result < 0:
        raise ValueError(f"{field_name} must be >= 0")
    return result


def _to_positive_int(value: Any, field_name: str) -> int:
    result = _to_non_negative_int(value, field_name)
    if result == 0:
        raise ValueError(f"{field_name} must be >= 1")
    return result


@dataclass(frozen=True)
class UsedRange:
    """Smallest rectangle holding every non-empty cell of a sheet (1-based, inclusive)."""

    first_row: int
    first_col: int
    last_row: int
    last_col: int

    @property
    def row_count(self) -> int:
        return self.last_row - self.first_row + 1

    @property
    def col_count(self) -> int:
        return self.last_col - self.first_col + 1


@dataclass(frozen=True)
class SheetLayout:
    """Where the summary row lives in a source sheet and whether column C is dropped."""

    source_row: int
    skip_column_c: bool = False

    def __post_init__(self) -> None:
        _to_positive_int(self.source_row, "source_row")


@dataclass(frozen=True)
class MappedCell:
    column: int
    value: Any


@dataclass
class RowMapping:
    """One source row translated into destination columns.

    ``scooted`` is set when column C was omitted and later columns moved left.
    """

    source_row: int
    cells: list[MappedCell] = field(default_factory=list)
    scooted: bool = False
    source_last_col: int = 0

    @property
    def has_values(self) -> bool:
        return any(not is_blank(cell.value) for cell in self.cells)

    def columns(self) -> list[int]:
        return [cell.column for cell in self.cells]


@dataclass
class AppendResult:
    """Outcome of appending one source row into one destination sheet."""

    sheet_name: str
    source_row: int
    skip_column_c: bool = False
    inserted: int = 0
    destination_row: int | None = None

    def __post_init__(self) -> None:
        self.inserted = _to_non_negative_int(self.inserted, "inserted")
        if self.inserted > 1:
            raise ValueError("inserted must be 0 or 1")
        if self.inserted and self.destination_row is None:
            raise ValueError("destination_row is required when a row was inserted")


@dataclass
class RunSummary:
    """Totals reported at the end of a run.

    Contract invariant: ``inserted_total == sum(r.inserted for r in results)``.
    """

    results: list[AppendResult] = field(default_factory=list)
    output_path: Path | None = None
    sheet_count: int = 0

    def __post_init__(self) -> None:
        self.sheet_count = _to_non_negative_int(self.sheet_count, "sheet_count")
        if len(self.results) > self.sheet_count:
            raise ValueError("results must not outnumber sheet_count")

    @property
    def inserted_total(self) -> int:
        return sum(result.inserted for result in self.results)
