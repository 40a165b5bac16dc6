from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from turnos_system.core.exceptions import NotFoundError
from turnos_system.locations.model import Location
from turnos_system.personnel.model import Employee
from turnos_system.reports.service import WeeklyReportService
from turnos_system.shifts.model import Shift
from turnos_system.snapshots.builder import build_snapshot
from turnos_system.snapshots.model import Snapshot


class FakeShifts:
    def __init__(self, shifts):
        self._shifts = shifts

    def list_shifts(self, *, location_id=None, employee_id=None, active=None, date_from=None, date_to=None):
        return [
            s
            for s in self._shifts
            if (employee_id is None or s.employee_id == employee_id)
            and (active is None or s.active == active)
            and (date_from is None or s.work_date >= date_from)
            and (date_to is None or s.work_date <= date_to)
        ]


class FakeEmployees:
    def __init__(self, employees):
        self._by_id = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def list_all(self):
        return list(self._by_id.values())

    def remove(self, employee_id: int) -> None:
        self._by_id.pop(employee_id, None)


class FakeSnapshots:
    def __init__(self, snapshots=()):
        self._by_id = {s.snapshot_id: s for s in snapshots}

    def get_by_id(self, snapshot_id: int) -> Optional[Snapshot]:
        return self._by_id.get(snapshot_id)


class FakeLocations:
    def __init__(self, locations):
        self._by_id = {loc.location_id: loc for loc in locations}

    def get_by_id(self, location_id: int) -> Optional[Location]:
        return self._by_id.get(location_id)


def _shift(shift_id, employee_id, location_id, day, start, end, active=True):
    return Shift(shift_id, employee_id, location_id, day, start, end, active)


def _service(snapshots=()):
    shifts = [
        _shift(1, 1, 10, date(2024, 3, 5), "14:00", "18:30"),
        _shift(2, 1, 10, date(2024, 3, 4), "09:00", "13:00"),
        _shift(3, 2, 20, date(2024, 3, 6), "09:00", "11:00"),
        _shift(4, 3, 99, date(2024, 3, 7), "10:00", "12:00"),
        _shift(5, 1, 10, date(2024, 3, 11), "09:00", "17:00"),
        _shift(6, 2, 20, date(2024, 3, 6), "15:00", "20:00", active=False),
    ]
    employees = [
        Employee(1, "Ana", "Gómez", "2235551234"),
        Employee(2, "Luis", "Pérez"),
    ]
    locations = [Location(10, "Centro"), Location(20, "Puerto")]
    return WeeklyReportService(
        FakeShifts(shifts), FakeEmployees(employees), FakeLocations(locations), FakeSnapshots(snapshots)
    )


def test_hours_by_employee_sorted_with_deleted_placeholder():
    rows = _service().hours_by_employee(date(2024, 3, 6))

    assert [(r.label, r.shift_count, r.total_hours) for r in rows] == [
        ("Ana Gómez", 2, 8.5),
        ("Luis Pérez", 1, 2.0),
        ("Empleado eliminado", 1, 2.0),
    ]


def test_hours_by_location_uses_placeholder_for_missing_location():
    rows = _service().hours_by_location(date(2024, 3, 6))
    assert {r.label: r.total_hours for r in rows} == {"Centro": 8.5, "Puerto": 2.0, "Local eliminado": 2.0}


def test_summary_averages_over_known_employees():
    summary = _service().summary(date(2024, 3, 6))
    assert summary.week_label == "Semana del 04/03 al 10/03"
    assert summary.shift_count == 4
    assert summary.total_hours == 12.5
    assert summary.employee_count == 2
    assert summary.average_hours_per_employee == 6.25


def test_employee_schedule_feeds_messaging():
    schedule = _service().employee_schedule(1, date(2024, 3, 10))

    assert schedule.phone == "2235551234"
    assert [s.shift_id for s in schedule.shifts] == [2, 1]
    assert schedule.location_labels == {10: "Centro"}
    assert schedule.total_hours == 8.5


def test_employee_schedule_unknown_employee():
    with pytest.raises(NotFoundError):
        _service().employee_schedule(3, date(2024, 3, 6))


def _saved(shifts, snapshot_id=7) -> Snapshot:
    new = build_snapshot(shifts, date(2024, 3, 6), "uid-1")
    return Snapshot(
        snapshot_id=snapshot_id,
        name=new.name,
        week_start=new.week_start,
        week_end=new.week_end,
        shifts=new.shifts,
        total_hours=new.total_hours,
        total_shifts=new.total_shifts,
        created_by=new.created_by,
        created_at=new.created_at,
    )


def test_snapshot_breakdown_groups_frozen_shifts_by_employee():
    saved = _saved(
        [
            _shift(1, 1, 10, date(2024, 3, 5), "14:00", "18:30"),
            _shift(2, 1, 10, date(2024, 3, 4), "09:00", "13:00"),
            _shift(3, 2, 20, date(2024, 3, 6), "09:00", "11:00"),
        ]
    )

    breakdown = _service([saved]).snapshot_breakdown(7)

    assert breakdown.name == "Semana del 04/03 al 10/03"
    assert [(g.label, g.total_hours) for g in breakdown.groups] == [("Ana Gómez", 8.5), ("Luis Pérez", 2.0)]
    assert [s.shift_id for s in breakdown.groups[0].shifts] == [2, 1]
    assert breakdown.location_labels == {10: "Centro", 20: "Puerto"}


def test_snapshot_breakdown_labels_people_and_places_removed_after_saving():
    saved = _saved(
        [
            _shift(1, 2, 20, date(2024, 3, 4), "09:00", "11:00"),
            _shift(2, 3, 99, date(2024, 3, 5), "10:00", "12:20"),
        ]
    )
    svc = _service([saved])
    svc._employees.remove(2)

    breakdown = svc.snapshot_breakdown(7)

    assert [g.label for g in breakdown.groups] == ["Empleado eliminado", "Empleado eliminado"]
    assert breakdown.groups[1].total_hours == pytest.approx(7 / 3)
    assert breakdown.location_labels == {20: "Puerto", 99: "Local eliminado"}
    assert breakdown.total_shifts == 2


def test_snapshot_breakdown_unknown_snapshot():
    with pytest.raises(NotFoundError):
        _service().snapshot_breakdown(404)
