import pytest

from turnos_system.common.datetime_utils import parse_hhmm
from turnos_system.shifts.intervals import TimeInterval, overlaps, shift_hours


def test_parse_hhmm_minutes_since_midnight():
    assert parse_hhmm("00:00") == 0
    assert parse_hhmm("09:30") == 570
    assert parse_hhmm("7:05") == 425
    assert parse_hhmm("23:59") == 1439


@pytest.mark.parametrize("value", ["", "9", "24:00", "12:60", "ab:cd", "12:5", None])
def test_parse_hhmm_fails_fast_on_malformed_input(value):
    with pytest.raises(ValueError):
        parse_hhmm(value)


def test_overlap_is_symmetric():
    pairs = [
        ("09:00", "13:00", "12:00", "16:00"),
        ("09:00", "13:00", "13:00", "17:00"),
        ("08:00", "18:00", "10:00", "11:00"),
        ("06:00", "07:00", "20:00", "22:00"),
    ]
    for a_s, a_e, b_s, b_e in pairs:
        assert overlaps(a_s, a_e, b_s, b_e) == overlaps(b_s, b_e, a_s, a_e)


def test_touching_intervals_do_not_overlap():
    assert overlaps("09:00", "13:00", "13:00", "17:00") is False
    assert overlaps("13:00", "17:00", "09:00", "13:00") is False


def test_identical_and_contained_intervals_overlap():
    assert overlaps("09:00", "13:00", "09:00", "13:00") is True
    assert overlaps("08:00", "18:00", "10:00", "11:00") is True


def test_interval_hours_keep_fractions():
    assert TimeInterval.from_hhmm("14:00", "18:30").duration_minutes == 270
    assert shift_hours("14:00", "18:30") == 4.5
