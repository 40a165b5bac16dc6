from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        raise NotImplementedError

    def list_shifts(
        self,
        *,
        location_id: Optional[int] = None,
        employee_id: Optional[int] = None,
        active: Optional[bool] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> Sequence[Shift]:
        """List shifts ordered by date. Date bounds are inclusive."""

        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        location_id: int,
        work_date: date,
        start_time: str,
        end_time: str,
        active: bool = True,
    ) -> int:
        """Returns shift_id."""

        raise NotImplementedError

    def update(
        self,
        *,
        shift_id: int,
        employee_id: int,
        location_id: int,
        work_date: date,
        start_time: str,
        end_time: str,
        active: bool,
    ) -> bool:
        raise NotImplementedError

    def update_location(self, *, shift_id: int, location_id: int) -> bool:
        raise NotImplementedError

    def delete(self, *, shift_id: int) -> bool:
        raise NotImplementedError
