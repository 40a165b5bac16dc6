from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Union

from ..core.constants import MINUTES_PER_HOUR

DayLike = Union[date, datetime]

_HHMM = re.compile(r"^(\d{1,2}):(\d{2})$")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_day(value: DayLike) -> date:
    """Drop the time-of-day component, keeping the calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Unsupported date value type: {type(value)!r}")


def parse_hhmm(value: str) -> int:
    """Parse an ``HH:mm`` clock string into minutes since midnight.

    Raises ValueError for anything that is not a valid 24h clock time.
    """
    m = _HHMM.match((value or "").strip()) if isinstance(value, str) else None
    if not m:
        raise ValueError(f"Invalid time string: {value!r}")
    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f"Invalid time string: {value!r}")
    return hours * MINUTES_PER_HOUR + minutes


def format_hhmm(value: time) -> str:
    return value.strftime("%H:%M")


def format_day_month(value: DayLike) -> str:
    """dd/mm, zero padded, no year."""
    return f"{value.day:02d}/{value.month:02d}"
