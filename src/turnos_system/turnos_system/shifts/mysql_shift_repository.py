from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import format_hhmm, to_day
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date, normalize_mysql_time
from .model import Shift
from .repository import ShiftRepository

_COLUMNS = "shift_id, employee_id, location_id, work_date, start_time, end_time, active, created_at"


def _row_to_shift(r: dict) -> Shift:
    return Shift(
        shift_id=int(r["shift_id"]),
        employee_id=int(r["employee_id"]),
        location_id=int(r["location_id"]),
        work_date=normalize_mysql_date(r["work_date"]),
        start_time=format_hhmm(normalize_mysql_time(r["start_time"])),
        end_time=format_hhmm(normalize_mysql_time(r["end_time"])),
        active=bool(r["active"]),
        created_at=r.get("created_at"),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shifts WHERE shift_id=%s", (int(shift_id),))
            r = fetchone(cur)
            return _row_to_shift(r) if r else None

    def list_shifts(
        self,
        *,
        location_id: Optional[int] = None,
        employee_id: Optional[int] = None,
        active: Optional[bool] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> Sequence[Shift]:
        clauses: list[str] = []
        params: list[object] = []
        if location_id is not None:
            clauses.append("location_id=%s")
            params.append(int(location_id))
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))
        if active is not None:
            clauses.append("active=%s")
            params.append(1 if active else 0)
        if date_from is not None:
            clauses.append("work_date >= %s")
            params.append(to_day(date_from))
        if date_to is not None:
            clauses.append("work_date <= %s")
            params.append(to_day(date_to))

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM shifts
                {where}
                ORDER BY work_date ASC, start_time ASC, shift_id ASC
                """,
                tuple(params),
            )
            return [_row_to_shift(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: int,
        location_id: int,
        work_date: date,
        start_time: str,
        end_time: str,
        active: bool = True,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shifts(employee_id, location_id, work_date, start_time, end_time, active)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(employee_id), int(location_id), to_day(work_date), start_time, end_time, 1 if active else 0),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        shift_id: int,
        employee_id: int,
        location_id: int,
        work_date: date,
        start_time: str,
        end_time: str,
        active: bool,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE shifts
                SET employee_id=%s, location_id=%s, work_date=%s, start_time=%s, end_time=%s, active=%s
                WHERE shift_id=%s
                """,
                (
                    int(employee_id),
                    int(location_id),
                    to_day(work_date),
                    start_time,
                    end_time,
                    1 if active else 0,
                    int(shift_id),
                ),
            )
            # MySQL reports 0 affected rows when values did not change.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS ok FROM shifts WHERE shift_id=%s", (int(shift_id),))
            return fetchone(cur) is not None

    def update_location(self, *, shift_id: int, location_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE shifts SET location_id=%s WHERE shift_id=%s", (int(location_id), int(shift_id)))
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS ok FROM shifts WHERE shift_id=%s", (int(shift_id),))
            return fetchone(cur) is not None

    def delete(self, *, shift_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM shifts WHERE shift_id=%s", (int(shift_id),))
            return cur.rowcount > 0
