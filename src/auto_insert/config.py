"""Default locations of the daily export and the master workbook."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from auto_insert import DEFAULT_SHEET_SELECTORS, SHEETS_PER_FILE

ENV_DAILY_DIR = "AUTOINSERT_DAILY_DIR"
ENV_DAILY_SUFFIX = "AUTOINSERT_DAILY_SUFFIX"
ENV_MASTER_PATH = "AUTOINSERT_MASTER_PATH"
ENV_DAY_OFFSET = "AUTOINSERT_DAY_OFFSET"

DEFAULT_DAILY_DIR = Path.home() / "Documents" / "EDI"
DEFAULT_DAILY_SUFFIX = " Stats - converted.xlsx"
DEFAULT_MASTER_NAME = "EDI_Daily_Stats_MASTER_TEST.xlsx"
DAILY_DATE_FORMAT = "%Y_%m_%d"


@dataclass
class RunConfig:
    """Locations used when the CLI is invoked without paths.

    The daily export is looked up as ``<daily_dir>/<date><daily_suffix>`` where the
    date is today shifted by ``day_offset`` days.
    """

    daily_dir: Path = DEFAULT_DAILY_DIR
    daily_suffix: str = DEFAULT_DAILY_SUFFIX
    master_path: Path = DEFAULT_DAILY_DIR / DEFAULT_MASTER_NAME
    day_offset: int = 0
    sheet_selectors: list[str] = field(default_factory=lambda: list(DEFAULT_SHEET_SELECTORS))

    def __post_init__(self) -> None:
        self.daily_dir = Path(self.daily_dir)
        self.master_path = Path(self.master_path)
        if isinstance(self.day_offset, bool) or not isinstance(self.day_offset, int):
            raise TypeError("day_offset must be an integer")
        if len(self.sheet_selectors) != SHEETS_PER_FILE:
            raise ValueError(
                f"Default sheet selector list must contain exactly {SHEETS_PER_FILE} items."
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RunConfig:
        """Build a config, overriding defaults from ``AUTOINSERT_*`` variables."""
        env = os.environ if environ is None else environ

        daily_dir = Path(env[ENV_DAILY_DIR]) if env.get(ENV_DAILY_DIR) else DEFAULT_DAILY_DIR
        daily_suffix = env.get(ENV_DAILY_SUFFIX) or DEFAULT_DAILY_SUFFIX
        master_raw = env.get(ENV_MASTER_PATH)
        master_path = Path(master_raw) if master_raw else daily_dir / DEFAULT_MASTER_NAME

        offset_raw = (env.get(ENV_DAY_OFFSET) or "").strip()
        try:
            day_offset = int(offset_raw) if offset_raw else 0
        except ValueError as exc:
            raise ValueError(
                f"Invalid {ENV_DAY_OFFSET} value: {offset_raw!r} (expected an integer)"
            ) from exc

        return cls(
            daily_dir=daily_dir,
            daily_suffix=daily_suffix,
            master_path=master_path,
            day_offset=day_offset,
        )
