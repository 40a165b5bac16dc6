from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..common.datetime_utils import DayLike
from ..common.week_window import WeekWindow
from ..core.constants import DELETED_EMPLOYEE_LABEL, DELETED_LOCATION_LABEL
from ..core.exceptions import NotFoundError
from ..locations.repository import LocationRepository
from ..personnel.repository import EmployeeRepository
from ..shifts.repository import ShiftRepository
from ..shifts.model import Shift
from ..snapshots.builder import total_hours
from ..snapshots.repository import SnapshotRepository


@dataclass(frozen=True)
class EmployeeHours:
    employee_id: int
    label: str
    shift_count: int
    total_hours: float
    shifts: List[Shift]


@dataclass(frozen=True)
class LocationHours:
    location_id: int
    label: str
    shift_count: int
    total_hours: float


@dataclass(frozen=True)
class WeekSummary:
    week_label: str
    employee_count: int
    shift_count: int
    total_hours: float
    average_hours_per_employee: float


@dataclass(frozen=True)
class EmployeeSchedule:
    """What the messaging collaborator needs to send someone their week."""

    employee_id: int
    full_name: str
    phone: Optional[str]
    week_label: str
    shifts: List[Shift]
    location_labels: Dict[int, str]
    total_hours: float


@dataclass(frozen=True)
class SnapshotEmployeeGroup:
    employee_id: int
    label: str
    shifts: List[Shift]
    total_hours: float


@dataclass(frozen=True)
class SnapshotBreakdown:
    """A saved week read back per employee, labelled with today's names."""

    snapshot_id: int
    name: str
    total_shifts: int
    total_hours: float
    groups: List[SnapshotEmployeeGroup]
    location_labels: Dict[int, str]


class WeeklyReportService:
    def __init__(
        self,
        shifts: ShiftRepository,
        employees: EmployeeRepository,
        locations: LocationRepository,
        snapshots: SnapshotRepository,
    ):
        self._shifts = shifts
        self._employees = employees
        self._locations = locations
        self._snapshots = snapshots

    def _week_shifts(self, window: WeekWindow, *, employee_id: Optional[int] = None) -> Sequence[Shift]:
        return self._shifts.list_shifts(
            employee_id=employee_id,
            active=True,
            date_from=window.start.date(),
            date_to=window.end.date(),
        )

    def _location_labels(self, shifts: Sequence[Shift]) -> Dict[int, str]:
        labels: Dict[int, str] = {}
        for location_id in {s.location_id for s in shifts}:
            location = self._locations.get_by_id(location_id)
            labels[location_id] = location.name if location else DELETED_LOCATION_LABEL
        return labels

    def hours_by_employee(self, anchor: DayLike) -> List[EmployeeHours]:
        window = WeekWindow.for_date(anchor)
        shifts = self._week_shifts(window)

        employees = self._employees.list_all()
        by_employee: Dict[int, List[Shift]] = {e.employee_id: [] for e in employees}
        for s in shifts:
            by_employee.setdefault(s.employee_id, []).append(s)

        labels = {e.employee_id: e.full_name for e in employees}
        out = [
            EmployeeHours(
                employee_id=employee_id,
                label=labels.get(employee_id, DELETED_EMPLOYEE_LABEL),
                shift_count=len(items),
                total_hours=total_hours(items),
                shifts=items,
            )
            for employee_id, items in by_employee.items()
        ]
        out.sort(key=lambda x: x.total_hours, reverse=True)
        return out

    def hours_by_location(self, anchor: DayLike) -> List[LocationHours]:
        window = WeekWindow.for_date(anchor)
        shifts = self._week_shifts(window)

        by_location: Dict[int, List[Shift]] = {}
        for s in shifts:
            by_location.setdefault(s.location_id, []).append(s)

        labels = self._location_labels(shifts)
        out = [
            LocationHours(
                location_id=location_id,
                label=labels[location_id],
                shift_count=len(items),
                total_hours=total_hours(items),
            )
            for location_id, items in by_location.items()
        ]
        out.sort(key=lambda x: x.total_hours, reverse=True)
        return out

    def summary(self, anchor: DayLike) -> WeekSummary:
        window = WeekWindow.for_date(anchor)
        shifts = self._week_shifts(window)
        employee_count = len(self._employees.list_all())
        hours = total_hours(shifts)
        return WeekSummary(
            week_label=window.label,
            employee_count=employee_count,
            shift_count=len(shifts),
            total_hours=hours,
            average_hours_per_employee=hours / employee_count if employee_count else 0.0,
        )

    def employee_schedule(self, employee_id: int, anchor: DayLike) -> EmployeeSchedule:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Empleado no existe")

        window = WeekWindow.for_date(anchor)
        shifts = sorted(
            self._week_shifts(window, employee_id=employee.employee_id),
            key=lambda s: (s.work_date, s.start_time),
        )
        return EmployeeSchedule(
            employee_id=employee.employee_id,
            full_name=employee.full_name,
            phone=employee.phone,
            week_label=window.label,
            shifts=shifts,
            location_labels=self._location_labels(shifts),
            total_hours=total_hours(shifts),
        )

    def snapshot_breakdown(self, snapshot_id: int) -> SnapshotBreakdown:
        snapshot = self._snapshots.get_by_id(int(snapshot_id))
        if not snapshot:
            raise NotFoundError("El snapshot no existe")

        by_employee: Dict[int, List[Shift]] = {}
        for s in snapshot.shifts:
            by_employee.setdefault(s.employee_id, []).append(s)

        groups = []
        for employee_id, items in by_employee.items():
            employee = self._employees.get_by_id(employee_id)
            groups.append(
                SnapshotEmployeeGroup(
                    employee_id=employee_id,
                    label=employee.full_name if employee else DELETED_EMPLOYEE_LABEL,
                    shifts=sorted(items, key=lambda s: (s.work_date, s.start_time)),
                    total_hours=total_hours(items),
                )
            )

        return SnapshotBreakdown(
            snapshot_id=snapshot.snapshot_id,
            name=snapshot.name,
            total_shifts=snapshot.total_shifts,
            total_hours=snapshot.total_hours,
            groups=groups,
            location_labels=self._location_labels(snapshot.shifts),
        )
