from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Shift:
    """Domain entity: one employee's work block at one location on one day."""

    shift_id: int
    employee_id: int
    location_id: int
    work_date: date
    start_time: str
    end_time: str
    active: bool = True
    created_at: Optional[datetime] = None

    def to_document(self) -> dict:
        """Plain copy used when a snapshot embeds the shift."""
        return {
            "shift_id": self.shift_id,
            "employee_id": self.employee_id,
            "location_id": self.location_id,
            "work_date": self.work_date.isoformat(),
            "start_time": self.start_time,
            "end_time": self.end_time,
            "active": self.active,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_document(cls, doc: dict) -> "Shift":
        created_at = doc.get("created_at")
        return cls(
            shift_id=int(doc["shift_id"]),
            employee_id=int(doc["employee_id"]),
            location_id=int(doc["location_id"]),
            work_date=date.fromisoformat(doc["work_date"]),
            start_time=doc["start_time"],
            end_time=doc["end_time"],
            active=bool(doc.get("active", True)),
            created_at=datetime.fromisoformat(created_at) if created_at else None,
        )


@dataclass(frozen=True)
class ProposedShift:
    """One slot of a full-week batch, before it is persisted."""

    work_date: date
    start_time: str
    end_time: str
