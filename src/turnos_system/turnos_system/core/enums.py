from __future__ import annotations

from enum import Enum


class AuditAction(str, Enum):
    """Acciones registradas en la bitácora de auditoría."""

    SHIFT_CREATED = "shift_created"
    SHIFT_UPDATED = "shift_updated"
    SHIFT_DELETED = "shift_deleted"
    SHIFT_MOVED = "shift_moved"
    FULL_WEEK_CREATED = "full_week_created"
    SNAPSHOT_CREATED = "snapshot_created"
    SNAPSHOT_DELETED = "snapshot_deleted"


class AuditEntityType(str, Enum):
    """Tipo de entidad afectada por una acción auditada."""

    SHIFT = "asignacion"
    SNAPSHOT = "snapshot"
