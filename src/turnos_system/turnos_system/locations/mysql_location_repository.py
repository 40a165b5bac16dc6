from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Location
from .repository import LocationRepository


class MySQLLocationRepository(LocationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, location_id: int) -> Optional[Location]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT location_id, name, address FROM locations WHERE location_id=%s", (int(location_id),))
            r = fetchone(cur)
            if not r:
                return None
            return Location(location_id=int(r["location_id"]), name=r["name"], address=r.get("address") or None)

    def list_all(self) -> Sequence[Location]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT location_id, name, address FROM locations ORDER BY created_at DESC, location_id DESC")
            return [
                Location(location_id=int(r["location_id"]), name=r["name"], address=r.get("address") or None)
                for r in fetchall(cur)
            ]

    def create(self, *, name: str, address: Optional[str] = None) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO locations(name, address) VALUES(%s,%s)", (name, address))
            return int(cur.lastrowid)

    def update(self, *, location_id: int, name: str, address: Optional[str] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE locations SET name=%s, address=%s WHERE location_id=%s",
                (name, address, int(location_id)),
            )
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS ok FROM locations WHERE location_id=%s", (int(location_id),))
            return fetchone(cur) is not None

    def delete(self, *, location_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM locations WHERE location_id=%s", (int(location_id),))
            return cur.rowcount > 0
