"""Shared helpers — blank checks, timestamps."""

from __future__ import annotations

from datetime import datetime
from typing import Any

STAMP_FORMAT = "%Y%m%d_%H%M%S"


def is_blank(value: Any) -> bool:
    """Return True when a cell value counts as empty (``None`` or ``""``)."""
    return value is None or (isinstance(value, str) and value == "")


def local_stamp(now: datetime | None = None) -> str:
    """Return *now* (default: the current local time) as ``yyyyMMdd_HHmmss``."""
    return (now or datetime.now()).strftime(STAMP_FORMAT)
