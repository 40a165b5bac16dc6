from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List


class EmployeeLocks:
    """One lock per employee, so a conflict check and the write that follows
    it cannot interleave with another mutation of the same employee's shifts.

    An entry lives only while some caller holds or waits on it, so the map is
    bounded by the number of concurrent callers.

    Note: Serialises callers inside one process only.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        # employee_id -> [lock, number of holders and waiters]
        self._locks: Dict[int, List] = {}

    def _acquire_entry(self, employee_id: int) -> threading.Lock:
        with self._guard:
            entry = self._locks.get(employee_id)
            if entry is None:
                entry = [threading.Lock(), 0]
                self._locks[employee_id] = entry
            entry[1] += 1
            return entry[0]

    def _release_entry(self, employee_id: int) -> None:
        with self._guard:
            entry = self._locks[employee_id]
            entry[1] -= 1
            if entry[1] == 0:
                del self._locks[employee_id]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    @contextmanager
    def hold(self, employee_id: int) -> Iterator[None]:
        employee_id = int(employee_id)
        lock = self._acquire_entry(employee_id)
        try:
            with lock:
                yield
        finally:
            self._release_entry(employee_id)
