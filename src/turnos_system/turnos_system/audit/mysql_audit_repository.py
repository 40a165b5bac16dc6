from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..core.constants import DEFAULT_AUDIT_LIMIT
from ..core.enums import AuditAction, AuditEntityType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dumps_json, fetchall, loads_json
from .model import AuditLogEntry
from .repository import AuditRepository


class MySQLAuditRepository(AuditRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO audit_logs(action, entity_type, entity_id, details_json, actor_id, actor_email)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    AuditAction(action).value,
                    AuditEntityType(entity_type).value,
                    str(entity_id) if entity_id is not None else None,
                    dumps_json(dict(details or {})),
                    str(actor_id),
                    actor_email or "",
                ),
            )
            return int(cur.lastrowid)

    def list_recent(
        self,
        *,
        entity_type: Optional[AuditEntityType] = None,
        entity_id: Optional[str] = None,
        actor_id: Optional[str] = None,
        limit: int = DEFAULT_AUDIT_LIMIT,
    ) -> Sequence[AuditLogEntry]:
        clauses: list[str] = []
        params: list[object] = []
        if entity_type is not None:
            clauses.append("entity_type=%s")
            params.append(AuditEntityType(entity_type).value)
        if entity_id is not None:
            clauses.append("entity_id=%s")
            params.append(str(entity_id))
        if actor_id is not None:
            clauses.append("actor_id=%s")
            params.append(str(actor_id))

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT log_id, action, entity_type, entity_id, details_json, actor_id, actor_email, created_at
                FROM audit_logs
                {where}
                ORDER BY created_at DESC, log_id DESC
                LIMIT %s
                """,
                tuple(params),
            )
            return [
                AuditLogEntry(
                    log_id=int(r["log_id"]),
                    action=AuditAction(r["action"]),
                    entity_type=AuditEntityType(r["entity_type"]),
                    actor_id=r["actor_id"],
                    created_at=r["created_at"],
                    entity_id=r.get("entity_id"),
                    actor_email=r.get("actor_email") or None,
                    details=loads_json(r["details_json"]) or {},
                )
                for r in fetchall(cur)
            ]
