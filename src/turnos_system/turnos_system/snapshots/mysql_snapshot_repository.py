from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dumps_json, fetchall, fetchone, loads_json
from ..shifts.model import Shift
from .model import NewSnapshot, Snapshot
from .repository import SnapshotRepository

_COLUMNS = "snapshot_id, name, week_start, week_end, shifts_json, total_hours, total_shifts, created_at, created_by"


def _row_to_snapshot(r: dict) -> Snapshot:
    docs = loads_json(r["shifts_json"]) or []
    return Snapshot(
        snapshot_id=int(r["snapshot_id"]),
        name=r["name"],
        week_start=r["week_start"],
        week_end=r["week_end"],
        shifts=tuple(Shift.from_document(d) for d in docs),
        total_hours=float(r["total_hours"]),
        total_shifts=int(r["total_shifts"]),
        created_by=r["created_by"],
        created_at=r.get("created_at"),
    )


class MySQLSnapshotRepository(SnapshotRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, snapshot: NewSnapshot) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO snapshots(name, week_start, week_end, shifts_json, total_hours, total_shifts, created_at, created_by)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    snapshot.name,
                    snapshot.week_start,
                    snapshot.week_end,
                    dumps_json([s.to_document() for s in snapshot.shifts]),
                    snapshot.total_hours,
                    snapshot.total_shifts,
                    snapshot.created_at,
                    snapshot.created_by,
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, snapshot_id: int) -> Optional[Snapshot]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM snapshots WHERE snapshot_id=%s", (int(snapshot_id),))
            r = fetchone(cur)
            return _row_to_snapshot(r) if r else None

    def list_all(self) -> Sequence[Snapshot]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM snapshots ORDER BY week_start DESC, snapshot_id DESC")
            return [_row_to_snapshot(r) for r in fetchall(cur)]

    def delete(self, *, snapshot_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM snapshots WHERE snapshot_id=%s", (int(snapshot_id),))
            return cur.rowcount > 0
