from datetime import date, datetime, timedelta

from turnos_system.common.week_window import WeekWindow, monday_of, sunday_of, week_label


def test_monday_of_every_day_in_week():
    for offset in range(7):
        d = date(2024, 3, 4) + timedelta(days=offset)
        assert monday_of(d) == datetime(2024, 3, 4, 0, 0, 0)


def test_sunday_maps_to_previous_monday():
    assert monday_of(datetime(2024, 3, 10, 18, 45)) == datetime(2024, 3, 4)


def test_monday_of_is_idempotent_and_a_monday():
    start = datetime(2023, 12, 27, 15, 30)
    for offset in range(30):
        d = start + timedelta(days=offset)
        m = monday_of(d)
        assert monday_of(m) == m
        assert m.weekday() == 0
        assert m.time() == datetime.min.time()


def test_sunday_of_is_end_of_day_six_days_later():
    monday = monday_of(date(2024, 3, 6))
    sunday = sunday_of(monday)
    assert sunday == datetime(2024, 3, 10, 23, 59, 59, 999000)
    assert (sunday.date() - monday.date()).days == 6


def test_week_crossing_year_boundary():
    window = WeekWindow.for_date(date(2025, 1, 1))
    assert window.start == datetime(2024, 12, 30)
    assert window.label == "Semana del 30/12 al 05/01"


def test_week_label_is_zero_padded():
    assert week_label(date(2024, 3, 4), date(2024, 3, 10)) == "Semana del 04/03 al 10/03"


def test_window_contains_and_navigation():
    window = WeekWindow.for_date(date(2024, 3, 6))
    assert window.contains(date(2024, 3, 4))
    assert window.contains(datetime(2024, 3, 10, 23, 0))
    assert not window.contains(date(2024, 3, 11))
    assert window.days()[0] == date(2024, 3, 4)
    assert len(window.days()) == 7
    assert window.next().start == datetime(2024, 3, 11)
    assert window.previous().start == datetime(2024, 2, 26)
