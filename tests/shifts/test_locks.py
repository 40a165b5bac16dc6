import threading

import pytest

from turnos_system.shifts.locks import EmployeeLocks


def test_entry_is_dropped_once_released():
    locks = EmployeeLocks()

    with locks.hold(1):
        assert len(locks) == 1
    with locks.hold(2):
        pass

    assert len(locks) == 0


def test_entry_is_dropped_when_the_body_raises():
    locks = EmployeeLocks()

    with pytest.raises(RuntimeError):
        with locks.hold(1):
            raise RuntimeError("boom")

    assert len(locks) == 0


def test_waiter_keeps_the_entry_alive_and_is_serialised():
    locks = EmployeeLocks()
    order = []
    waiting = threading.Event()

    def second():
        with locks.hold(1):
            order.append("second")

    with locks.hold(1):
        worker = threading.Thread(target=second)
        worker.start()
        while locks._locks[1][1] < 2:
            waiting.wait(0.01)
        order.append("first")

    worker.join(timeout=5)
    assert order == ["first", "second"]
    assert len(locks) == 0
