from datetime import date, datetime

from turnos_system.shifts.model import Shift
from turnos_system.snapshots.builder import build_snapshot, total_hours


def _shift(shift_id, start, end, day=date(2024, 3, 5)):
    return Shift(
        shift_id=shift_id,
        employee_id=1,
        location_id=1,
        work_date=day,
        start_time=start,
        end_time=end,
    )


def test_totals_keep_fractional_hours():
    shifts = [_shift(1, "09:00", "13:00"), _shift(2, "14:00", "18:30")]

    snap = build_snapshot(shifts, date(2024, 3, 6), "uid-1", now=datetime(2024, 3, 9, 12, 0))

    assert snap.total_hours == 8.5
    assert snap.total_shifts == 2
    assert snap.created_by == "uid-1"
    assert snap.created_at == datetime(2024, 3, 9, 12, 0)


def test_week_fields_come_from_anchor():
    snap = build_snapshot([], datetime(2024, 3, 10, 22, 15), "uid-1")

    assert snap.week_start == datetime(2024, 3, 4)
    assert snap.week_end == datetime(2024, 3, 10, 23, 59, 59, 999000)
    assert snap.name == "Semana del 04/03 al 10/03"


def test_empty_snapshot_has_zero_totals():
    snap = build_snapshot([], date(2024, 3, 6), "uid-1")
    assert snap.total_hours == 0
    assert snap.total_shifts == 0
    assert snap.shifts == ()
    assert snap.name.startswith("Semana del ")


def test_snapshot_holds_copies_not_the_caller_list():
    shifts = [_shift(1, "09:00", "13:00")]

    snap = build_snapshot(shifts, date(2024, 3, 6), "uid-1")
    shifts.append(_shift(2, "14:00", "15:00"))
    shifts[0] = _shift(1, "06:00", "07:00")

    assert len(snap.shifts) == 1
    assert snap.shifts[0].start_time == "09:00"
    assert snap.total_hours == 4


def test_total_hours_of_nothing_is_zero():
    assert total_hours([]) == 0
