from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime

from turnos_system.shifts.model import Shift
from turnos_system.snapshots import mysql_snapshot_repository
from turnos_system.snapshots.builder import build_snapshot
from turnos_system.snapshots.mysql_snapshot_repository import MySQLSnapshotRepository


class RecordingCursor:
    def __init__(self, row=None):
        self.row = row
        self.executed = []
        self.lastrowid = 1
        self.rowcount = 1

    def execute(self, sql, params=()):
        self.executed.append((sql, params))

    def fetchone(self):
        return self.row


def _patch_cursor(monkeypatch, cur):
    @contextmanager
    def fake_db_cursor(conn_factory, *, dictionary=True):
        yield None, cur

    monkeypatch.setattr(mysql_snapshot_repository, "db_cursor", fake_db_cursor)


def test_create_stores_total_hours_without_rounding(monkeypatch):
    cur = RecordingCursor()
    _patch_cursor(monkeypatch, cur)
    shift = Shift(1, 1, 10, date(2024, 3, 4), "09:00", "09:20")
    snapshot = build_snapshot([shift], date(2024, 3, 4), "uid-1", now=datetime(2024, 3, 4, 12, 0))

    MySQLSnapshotRepository(conn_factory=None).create(snapshot)

    _, params = cur.executed[0]
    assert params[4] == snapshot.total_hours == 20 / 60


def test_reloaded_total_matches_its_frozen_shifts(monkeypatch):
    cur = RecordingCursor()
    _patch_cursor(monkeypatch, cur)
    repo = MySQLSnapshotRepository(conn_factory=None)
    shift = Shift(1, 1, 10, date(2024, 3, 4), "09:00", "09:20")
    snapshot = build_snapshot([shift], date(2024, 3, 4), "uid-1", now=datetime(2024, 3, 4, 12, 0))
    repo.create(snapshot)

    _, p = cur.executed[0]
    cur.row = {
        "snapshot_id": 1,
        "name": p[0],
        "week_start": p[1],
        "week_end": p[2],
        "shifts_json": p[3],
        "total_hours": p[4],
        "total_shifts": p[5],
        "created_at": p[6],
        "created_by": p[7],
    }
    loaded = repo.get_by_id(1)

    assert loaded.shifts == (shift,)
    assert loaded.total_hours == build_snapshot(loaded.shifts, date(2024, 3, 4), "uid-1").total_hours
