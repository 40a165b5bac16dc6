"""Clock-time ranges of a single day.

Ranges are half-open ``[start, end)`` in minutes since midnight, so a shift
ending at 13:00 and another starting at 13:00 do not overlap.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import parse_hhmm
from ..core.constants import MINUTES_PER_HOUR


@dataclass(frozen=True)
class TimeInterval:
    start: int
    end: int

    @classmethod
    def from_hhmm(cls, start: str, end: str) -> "TimeInterval":
        return cls(start=parse_hhmm(start), end=parse_hhmm(end))

    def overlaps(self, other: "TimeInterval") -> bool:
        return self.start < other.end and other.start < self.end

    @property
    def duration_minutes(self) -> int:
        return self.end - self.start

    @property
    def hours(self) -> float:
        return self.duration_minutes / MINUTES_PER_HOUR


def overlaps(a_start: str, a_end: str, b_start: str, b_end: str) -> bool:
    """True if ``[a_start, a_end)`` and ``[b_start, b_end)`` share any minute."""
    return TimeInterval.from_hhmm(a_start, a_end).overlaps(TimeInterval.from_hhmm(b_start, b_end))


def shift_hours(start: str, end: str) -> float:
    return TimeInterval.from_hhmm(start, end).hours
