"""Shift conflict detection.

Two active shifts of the same employee conflict when they fall on the same
calendar day and their clock ranges overlap. The checks are pure: they read
``existing_shifts`` and never write to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Sequence

from ..common.datetime_utils import DayLike, format_day_month, to_day
from ..core.constants import UNKNOWN_LOCATION_LABEL
from .intervals import TimeInterval
from .model import ProposedShift, Shift


@dataclass(frozen=True)
class ConflictResult:
    conflict: bool
    message: Optional[str] = None
    conflicting_shift: Optional[Shift] = None


@dataclass(frozen=True)
class BatchConflictResult:
    conflict: bool
    message: Optional[str] = None
    conflicting_dates: List[str] = field(default_factory=list)


NO_CONFLICT = ConflictResult(conflict=False)


def _same_day_candidates(
    employee_id: int,
    day: DayLike,
    existing_shifts: Iterable[Shift],
    exclude_shift_id: Optional[int],
) -> List[Shift]:
    target = to_day(day)
    return [
        s
        for s in existing_shifts
        if s.employee_id == employee_id
        and to_day(s.work_date) == target
        and s.active
        and (exclude_shift_id is None or s.shift_id != exclude_shift_id)
    ]


def check_conflict(
    employee_id: int,
    day: DayLike,
    start: str,
    end: str,
    existing_shifts: Iterable[Shift],
    exclude_shift_id: Optional[int] = None,
    *,
    location_names: Optional[Mapping[int, str]] = None,
) -> ConflictResult:
    """Check a proposed shift against the employee's active shifts of that day.

    The first overlapping candidate decides the message. ``exclude_shift_id``
    lets an edit skip the shift's own previous state.
    """
    candidates = _same_day_candidates(employee_id, day, existing_shifts, exclude_shift_id)
    if not candidates:
        return NO_CONFLICT

    proposed = TimeInterval.from_hhmm(start, end)
    for candidate in candidates:
        if proposed.overlaps(TimeInterval.from_hhmm(candidate.start_time, candidate.end_time)):
            location = (location_names or {}).get(candidate.location_id) or UNKNOWN_LOCATION_LABEL
            return ConflictResult(
                conflict=True,
                message=(
                    f"Este empleado ya tiene un turno este día de "
                    f"{candidate.start_time} a {candidate.end_time} en {location}"
                ),
                conflicting_shift=candidate,
            )

    return NO_CONFLICT


def check_conflicts_batch(
    employee_id: int,
    proposed: Sequence[ProposedShift],
    existing_shifts: Sequence[Shift],
) -> BatchConflictResult:
    """Check every proposed slot against the same pre-batch shifts.

    Unlike ``check_conflict`` this reports every conflicting date, formatted
    dd/mm, and does not compare proposed slots with each other.
    """
    conflicting_dates: List[str] = []
    for slot in proposed:
        result = check_conflict(employee_id, slot.work_date, slot.start_time, slot.end_time, existing_shifts)
        if result.conflict:
            conflicting_dates.append(format_day_month(slot.work_date))

    if not conflicting_dates:
        return BatchConflictResult(conflict=False)

    return BatchConflictResult(
        conflict=True,
        message=f"Ya hay turnos asignados en: {', '.join(conflicting_dates)}",
        conflicting_dates=conflicting_dates,
    )
