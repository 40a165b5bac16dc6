"""Monday-Sunday week boundaries.

A week window starts on Monday at 00:00:00.000 and ends on Sunday at
23:59:59.999, so range filters over it can be inclusive on both ends.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import List

from ..core.constants import DAYS_PER_WEEK
from .datetime_utils import DayLike, format_day_month, to_day

END_OF_DAY = time(23, 59, 59, 999000)


def monday_of(value: DayLike) -> datetime:
    # date.weekday(): Monday=0 .. Sunday=6
    day = to_day(value)
    monday = day - timedelta(days=day.weekday())
    return datetime.combine(monday, time.min)


def sunday_of(monday: DayLike) -> datetime:
    return datetime.combine(to_day(monday) + timedelta(days=DAYS_PER_WEEK - 1), END_OF_DAY)


def week_label(monday: DayLike, sunday: DayLike) -> str:
    return f"Semana del {format_day_month(monday)} al {format_day_month(sunday)}"


@dataclass(frozen=True)
class WeekWindow:
    start: datetime
    end: datetime

    @classmethod
    def for_date(cls, value: DayLike) -> "WeekWindow":
        monday = monday_of(value)
        return cls(start=monday, end=sunday_of(monday))

    @property
    def label(self) -> str:
        return week_label(self.start, self.end)

    def contains(self, value: DayLike) -> bool:
        return self.start.date() <= to_day(value) <= self.end.date()

    def days(self) -> List[date]:
        first = self.start.date()
        return [first + timedelta(days=i) for i in range(DAYS_PER_WEEK)]

    def previous(self) -> "WeekWindow":
        return WeekWindow.for_date(self.start - timedelta(days=DAYS_PER_WEEK))

    def next(self) -> "WeekWindow":
        return WeekWindow.for_date(self.start + timedelta(days=DAYS_PER_WEEK))
