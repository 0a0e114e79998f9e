"""Turn positional CLI arguments into the two workbook paths and their selectors."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path

from auto_insert import SHEETS_PER_FILE
from auto_insert.config import DAILY_DATE_FORMAT, RunConfig

# pathA + 5 selectors + pathB + 5 selectors
FULL_ARG_COUNT = 2 + 2 * SHEETS_PER_FILE


class UsageError(ValueError):
    """Raised when the command line cannot be turned into a run."""


@dataclass(frozen=True)
class RunInputs:
    """Resolved paths and selectors; ``None`` selectors mean "use the defaults"."""

    path_a: Path
    path_b: Path
    selectors_a: list[str] | None = None
    selectors_b: list[str] | None = None


def default_daily_path(config: RunConfig, today: date | None = None) -> Path:
    """Return the expected path of the daily export for *today* (shifted by the offset)."""
    day = (today or date.today()) + timedelta(days=config.day_offset)
    return config.daily_dir / f"{day.strftime(DAILY_DATE_FORMAT)}{config.daily_suffix}"


def resolve_inputs(
    args: Sequence[str],
    config: RunConfig,
    today: date | None = None,
) -> RunInputs:
    """Resolve 0, 2 or 12 positional arguments.

    Raises
    ------
    UsageError
        For any other argument count.
    """
    args = list(args)
    if not args:
        return RunInputs(path_a=default_daily_path(config, today), path_b=config.master_path)

    if len(args) == 2:
        return RunInputs(path_a=Path(args[0]), path_b=Path(args[1]))

    if len(args) == FULL_ARG_COUNT:
        b_index = 1 + SHEETS_PER_FILE
        return RunInputs(
            path_a=Path(args[0]),
            path_b=Path(args[b_index]),
            selectors_a=args[1:b_index],
            selectors_b=args[b_index + 1:],
        )

    raise UsageError(
        "Expected 0 args (use default paths), 2 args (two files), or "
        f"{FULL_ARG_COUNT} args (two files + {SHEETS_PER_FILE} sheet selectors each); "
        f"got {len(args)}."
    )


def usage_notes(config: RunConfig, today: date | None = None) -> list[str]:
    """Guidance printed after any usage error."""
    return [
        "Usage:",
        "  autoinsert",
        "  autoinsert <pathA> <pathB>",
        "  autoinsert <pathA> <selA1> .. <selA5> <pathB> <selB1> .. <selB5>",
        "Notes:",
        "  - <sel> can be a sheet name (e.g. Sheet1) or a 1-based index (e.g. 2).",
        "  - If you omit sheet selectors, these are used: "
        + ", ".join(config.sheet_selectors),
        "  - With no args, defaults to:",
        f"      A: {default_daily_path(config, today)}",
        f"      B: {config.master_path}",
    ]
