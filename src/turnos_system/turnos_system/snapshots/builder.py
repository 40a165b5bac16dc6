from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Iterable, Optional

from ..common.datetime_utils import DayLike, now_local
from ..common.week_window import monday_of, sunday_of, week_label
from ..shifts.intervals import shift_hours
from ..shifts.model import Shift
from .model import NewSnapshot


def total_hours(shifts: Iterable[Shift]) -> float:
    return sum(shift_hours(s.start_time, s.end_time) for s in shifts)


def build_snapshot(
    active_shifts: Iterable[Shift],
    week_anchor_date: DayLike,
    creator_id: str,
    *,
    now: Optional[datetime] = None,
) -> NewSnapshot:
    """Freeze the given shifts into a snapshot labelled by the anchor's week.

    The shifts are copied, so later edits or deletions of the live shifts do
    not reach the snapshot. An empty list gives a snapshot with zero totals.
    """
    monday = monday_of(week_anchor_date)
    sunday = sunday_of(monday)
    copies = tuple(replace(s) for s in active_shifts)

    return NewSnapshot(
        name=week_label(monday, sunday),
        week_start=monday,
        week_end=sunday,
        shifts=copies,
        total_hours=total_hours(copies),
        total_shifts=len(copies),
        created_by=str(creator_id),
        created_at=now or now_local(),
    )
