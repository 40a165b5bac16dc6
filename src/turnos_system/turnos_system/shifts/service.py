from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from ..audit.model import Actor
from ..audit.repository import AuditRepository
from ..common.datetime_utils import DayLike, format_day_month, to_day
from ..common.validators import require_hhmm, require_positive_id, require_time_order
from ..common.week_window import WeekWindow
from ..core.enums import AuditAction, AuditEntityType
from ..core.exceptions import NotFoundError, ShiftConflictError, ValidationError
from ..locations.repository import LocationRepository
from .conflicts import check_conflict, check_conflicts_batch
from .locks import EmployeeLocks
from .model import ProposedShift, Shift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class ShiftService:
    """Use cases that mutate shifts.

    Each mutation validates first, checks conflicts against the employee's
    active shifts under a per-employee lock, writes, and only then records
    one audit entry.
    """

    def __init__(
        self,
        shifts: ShiftRepository,
        audit: AuditRepository,
        *,
        locations: Optional[LocationRepository] = None,
        locks: Optional[EmployeeLocks] = None,
    ):
        self._shifts = shifts
        self._audit = audit
        self._locations = locations
        self._locks = locks or EmployeeLocks()

    @staticmethod
    def _validate_slot(start_time: str, end_time: str) -> tuple[str, str]:
        start_time = require_hhmm(start_time, "Hora de inicio")
        end_time = require_hhmm(end_time, "Hora de fin")
        require_time_order(start_time, end_time)
        return start_time, end_time

    def _location_names(self, shifts: Iterable[Shift]) -> Dict[int, str]:
        if not self._locations:
            return {}
        names: Dict[int, str] = {}
        for location_id in {s.location_id for s in shifts}:
            location = self._locations.get_by_id(location_id)
            if location:
                names[location_id] = location.name
        return names

    def _require_shift(self, shift_id: int) -> Shift:
        shift = self._shifts.get_by_id(int(shift_id))
        if not shift:
            raise NotFoundError("El turno no existe")
        return shift

    def _active_shifts_on(self, employee_id: int, first: date, last: date) -> Sequence[Shift]:
        return self._shifts.list_shifts(employee_id=employee_id, active=True, date_from=first, date_to=last)

    def _ensure_no_conflict(
        self,
        *,
        employee_id: int,
        day: date,
        start_time: str,
        end_time: str,
        exclude_shift_id: Optional[int] = None,
    ) -> None:
        existing = self._active_shifts_on(employee_id, day, day)
        result = check_conflict(
            employee_id,
            day,
            start_time,
            end_time,
            existing,
            exclude_shift_id,
            location_names=self._location_names(existing),
        )
        if result.conflict:
            logger.warning("Shift rejected for employee %s on %s: %s", employee_id, day, result.message)
            raise ShiftConflictError(result.message or "Conflicto de horario", conflicting_dates=[format_day_month(day)])

    def _record(self, actor: Actor, action: AuditAction, entity_id: Optional[int], details: dict) -> None:
        self._audit.record(
            action=action,
            entity_type=AuditEntityType.SHIFT,
            actor_id=actor.actor_id,
            actor_email=actor.email,
            entity_id=str(entity_id) if entity_id is not None else None,
            details=details,
        )

    def create(
        self,
        actor: Actor,
        *,
        employee_id: int,
        location_id: int,
        work_date: DayLike,
        start_time: str,
        end_time: str,
    ) -> int:
        employee_id = require_positive_id(employee_id, "Empleado")
        location_id = require_positive_id(location_id, "Local")
        start_time, end_time = self._validate_slot(start_time, end_time)
        day = to_day(work_date)

        with self._locks.hold(employee_id):
            self._ensure_no_conflict(employee_id=employee_id, day=day, start_time=start_time, end_time=end_time)
            shift_id = self._shifts.create(
                employee_id=employee_id,
                location_id=location_id,
                work_date=day,
                start_time=start_time,
                end_time=end_time,
            )

        self._record(
            actor,
            AuditAction.SHIFT_CREATED,
            shift_id,
            {
                "employee_id": employee_id,
                "location_id": location_id,
                "work_date": day.isoformat(),
                "start_time": start_time,
                "end_time": end_time,
            },
        )
        logger.info("Shift %s created for employee %s on %s", shift_id, employee_id, day)
        return shift_id

    def edit(
        self,
        actor: Actor,
        *,
        shift_id: int,
        employee_id: int,
        location_id: int,
        work_date: DayLike,
        start_time: str,
        end_time: str,
        active: bool = True,
    ) -> None:
        employee_id = require_positive_id(employee_id, "Empleado")
        location_id = require_positive_id(location_id, "Local")
        start_time, end_time = self._validate_slot(start_time, end_time)
        day = to_day(work_date)

        with self._locks.hold(employee_id):
            current = self._require_shift(shift_id)
            if active:
                self._ensure_no_conflict(
                    employee_id=employee_id,
                    day=day,
                    start_time=start_time,
                    end_time=end_time,
                    exclude_shift_id=current.shift_id,
                )
            ok = self._shifts.update(
                shift_id=current.shift_id,
                employee_id=employee_id,
                location_id=location_id,
                work_date=day,
                start_time=start_time,
                end_time=end_time,
                active=bool(active),
            )
            if not ok:
                raise NotFoundError("El turno no existe")

        after = {
            "employee_id": employee_id,
            "location_id": location_id,
            "work_date": day.isoformat(),
            "start_time": start_time,
            "end_time": end_time,
            "active": bool(active),
        }
        before = current.to_document()
        changes = {k: v for k, v in after.items() if before.get(k) != v}
        self._record(actor, AuditAction.SHIFT_UPDATED, current.shift_id, changes)
        logger.info("Shift %s updated (%s)", current.shift_id, ", ".join(sorted(changes)) or "no changes")

    def move(self, actor: Actor, *, shift_id: int, new_location_id: int) -> None:
        """Change only the location; employee, day and time stay, so no re-check."""
        new_location_id = require_positive_id(new_location_id, "Local")
        current = self._require_shift(shift_id)

        if not self._shifts.update_location(shift_id=current.shift_id, location_id=new_location_id):
            raise NotFoundError("El turno no existe")

        self._record(
            actor,
            AuditAction.SHIFT_MOVED,
            current.shift_id,
            {"previous_location_id": current.location_id, "new_location_id": new_location_id},
        )
        logger.info("Shift %s moved %s -> %s", current.shift_id, current.location_id, new_location_id)

    def delete(self, actor: Actor, *, shift_id: int) -> None:
        current = self._require_shift(shift_id)
        if not self._shifts.delete(shift_id=current.shift_id):
            raise NotFoundError("El turno no existe")

        self._record(
            actor,
            AuditAction.SHIFT_DELETED,
            current.shift_id,
            {
                "employee_id": current.employee_id,
                "location_id": current.location_id,
                "work_date": current.work_date.isoformat(),
            },
        )
        logger.info("Shift %s deleted", current.shift_id)

    def create_full_week(
        self,
        actor: Actor,
        *,
        employee_id: int,
        location_id: int,
        days: Sequence[DayLike],
        start_time: str,
        end_time: str,
    ) -> List[int]:
        """Create the same slot on several days of a week.

        All days are checked against the shifts that existed before the batch.
        Creation is not transactional: if a write fails, shifts created before
        it remain and the error propagates without an audit entry.
        """
        employee_id = require_positive_id(employee_id, "Empleado")
        location_id = require_positive_id(location_id, "Local")
        start_time, end_time = self._validate_slot(start_time, end_time)

        unique_days = sorted({to_day(d) for d in days})
        if not unique_days:
            raise ValidationError("Selecciona al menos un día")
        if len(unique_days) != len(days):
            raise ValidationError("Cada día sólo puede aparecer una vez")

        proposed = [ProposedShift(work_date=d, start_time=start_time, end_time=end_time) for d in unique_days]

        with self._locks.hold(employee_id):
            existing = list(self._active_shifts_on(employee_id, unique_days[0], unique_days[-1]))
            result = check_conflicts_batch(employee_id, proposed, existing)
            if result.conflict:
                logger.warning("Full week rejected for employee %s: %s", employee_id, result.message)
                raise ShiftConflictError(result.message or "Conflicto de horario", conflicting_dates=result.conflicting_dates)

            created = [
                self._shifts.create(
                    employee_id=employee_id,
                    location_id=location_id,
                    work_date=slot.work_date,
                    start_time=slot.start_time,
                    end_time=slot.end_time,
                )
                for slot in proposed
            ]

        self._record(
            actor,
            AuditAction.FULL_WEEK_CREATED,
            None,
            {
                "shift_count": len(created),
                "shift_ids": created,
                "employee_id": employee_id,
                "location_id": location_id,
                "dates": [d.isoformat() for d in unique_days],
            },
        )
        logger.info("Full week created for employee %s: %d shifts", employee_id, len(created))
        return created

    def list_week(
        self,
        anchor: DayLike,
        *,
        location_id: Optional[int] = None,
        employee_id: Optional[int] = None,
    ) -> Sequence[Shift]:
        window = WeekWindow.for_date(anchor)
        return self._shifts.list_shifts(
            location_id=location_id,
            employee_id=employee_id,
            active=True,
            date_from=window.start.date(),
            date_to=window.end.date(),
        )
