from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.enums import AuditAction, AuditEntityType
from .model import AuditLogEntry


class AuditRepository(Protocol):
    """Append-only sink for audit facts."""

    def record(
        self,
        *,
        action: AuditAction,
        entity_type: AuditEntityType,
        actor_id: str,
        actor_email: Optional[str] = None,
        entity_id: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
    ) -> int:
        """Returns log_id."""

        raise NotImplementedError

    def list_recent(
        self,
        *,
        entity_type: Optional[AuditEntityType] = None,
        entity_id: Optional[str] = None,
        actor_id: Optional[str] = None,
        limit: int = 100,
    ) -> Sequence[AuditLogEntry]:
        raise NotImplementedError
