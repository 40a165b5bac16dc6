from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        """Ordered by last name."""

        raise NotImplementedError

    def create(self, *, first_name: str, last_name: str, phone: Optional[str] = None) -> int:
        raise NotImplementedError

    def update(self, *, employee_id: int, first_name: str, last_name: str, phone: Optional[str] = None) -> bool:
        raise NotImplementedError

    def delete(self, *, employee_id: int) -> bool:
        raise NotImplementedError
