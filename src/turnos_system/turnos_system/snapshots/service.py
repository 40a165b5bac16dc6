from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..audit.model import Actor
from ..audit.repository import AuditRepository
from ..common.datetime_utils import DayLike, now_local
from ..common.week_window import monday_of
from ..core.enums import AuditAction, AuditEntityType
from ..core.exceptions import NotFoundError
from ..shifts.repository import ShiftRepository
from .builder import build_snapshot
from .model import Snapshot
from .repository import SnapshotRepository

logger = logging.getLogger(__name__)


class SnapshotService:
    """Use case: save the current schedule as an immutable weekly record."""

    def __init__(self, shifts: ShiftRepository, snapshots: SnapshotRepository, audit: AuditRepository):
        self._shifts = shifts
        self._snapshots = snapshots
        self._audit = audit

    def save_week(self, actor: Actor, *, anchor: Optional[DayLike] = None) -> int:
        anchor = anchor or now_local()
        # Every active shift is captured, not only the anchor's week.
        active = self._shifts.list_shifts(active=True)
        snapshot = build_snapshot(active, anchor, actor.actor_id)

        snapshot_id = self._snapshots.create(snapshot)

        self._audit.record(
            action=AuditAction.SNAPSHOT_CREATED,
            entity_type=AuditEntityType.SNAPSHOT,
            actor_id=actor.actor_id,
            actor_email=actor.email,
            entity_id=str(snapshot_id),
            details={
                "anchor": anchor.isoformat(),
                "name": snapshot.name,
                "total_shifts": snapshot.total_shifts,
                "total_hours": snapshot.total_hours,
            },
        )
        logger.info("Snapshot %s saved: %s (%d shifts)", snapshot_id, snapshot.name, snapshot.total_shifts)
        return snapshot_id

    def delete(self, actor: Actor, *, snapshot_id: int) -> None:
        snapshot = self._snapshots.get_by_id(int(snapshot_id))
        if not snapshot:
            raise NotFoundError("El snapshot no existe")

        if not self._snapshots.delete(snapshot_id=snapshot.snapshot_id):
            raise NotFoundError("El snapshot no existe")

        self._audit.record(
            action=AuditAction.SNAPSHOT_DELETED,
            entity_type=AuditEntityType.SNAPSHOT,
            actor_id=actor.actor_id,
            actor_email=actor.email,
            entity_id=str(snapshot.snapshot_id),
            details={
                "name": snapshot.name,
                "total_shifts": snapshot.total_shifts,
                "total_hours": snapshot.total_hours,
            },
        )
        logger.info("Snapshot %s deleted", snapshot.snapshot_id)

    def get(self, snapshot_id: int) -> Optional[Snapshot]:
        return self._snapshots.get_by_id(int(snapshot_id))

    def list_all(self) -> Sequence[Snapshot]:
        return self._snapshots.list_all()

    def list_for_week(self, anchor: DayLike) -> List[Snapshot]:
        monday = monday_of(anchor)
        return [s for s in self._snapshots.list_all() if monday_of(s.week_start) == monday]
