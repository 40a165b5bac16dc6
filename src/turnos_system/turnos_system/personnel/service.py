from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.constants import DELETED_EMPLOYEE_LABEL
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_PHONE_CHARS = re.compile(r"^\+?[\d\s\-()]{6,}$")


class PersonnelService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    @staticmethod
    def _clean_phone(phone: Optional[str]) -> Optional[str]:
        phone = optional_text(phone)
        if phone and not _PHONE_CHARS.match(phone):
            raise ValidationError("Teléfono no es válido")
        return phone

    def create(self, *, first_name: str, last_name: str, phone: Optional[str] = None) -> int:
        first_name = require_non_empty(first_name, "Nombre")
        last_name = require_non_empty(last_name, "Apellido")
        employee_id = self._employees.create(
            first_name=first_name, last_name=last_name, phone=self._clean_phone(phone)
        )
        logger.info("Employee %s created", employee_id)
        return employee_id

    def update(self, *, employee_id: int, first_name: str, last_name: str, phone: Optional[str] = None) -> None:
        first_name = require_non_empty(first_name, "Nombre")
        last_name = require_non_empty(last_name, "Apellido")
        ok = self._employees.update(
            employee_id=int(employee_id),
            first_name=first_name,
            last_name=last_name,
            phone=self._clean_phone(phone),
        )
        if not ok:
            raise NotFoundError("Empleado no existe")

    def delete(self, *, employee_id: int) -> None:
        # Shifts and snapshots keep the id; they render a placeholder afterwards.
        if not self._employees.delete(employee_id=int(employee_id)):
            raise NotFoundError("Empleado no existe")
        logger.info("Employee %s deleted", employee_id)

    def find(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get_by_id(int(employee_id))

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def label_for(self, employee_id: int) -> str:
        employee = self.find(employee_id)
        return employee.full_name if employee else DELETED_EMPLOYEE_LABEL
