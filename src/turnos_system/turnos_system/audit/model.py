from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from ..core.enums import AuditAction, AuditEntityType


@dataclass(frozen=True)
class Actor:
    """Who performs a mutating action (taken from the authenticated session)."""

    actor_id: str
    email: Optional[str] = None


@dataclass(frozen=True)
class AuditLogEntry:
    log_id: int
    action: AuditAction
    entity_type: AuditEntityType
    actor_id: str
    created_at: datetime
    entity_id: Optional[str] = None
    actor_email: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)
