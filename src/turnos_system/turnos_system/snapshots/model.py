from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from ..shifts.model import Shift


@dataclass(frozen=True)
class NewSnapshot:
    """A frozen week, computed but not yet persisted."""

    name: str
    week_start: datetime
    week_end: datetime
    shifts: Tuple[Shift, ...]
    total_hours: float
    total_shifts: int
    created_by: str
    created_at: datetime


@dataclass(frozen=True)
class Snapshot:
    """Persisted week snapshot. Its shift copies never follow live edits."""

    snapshot_id: int
    name: str
    week_start: datetime
    week_end: datetime
    shifts: Tuple[Shift, ...]
    total_hours: float
    total_shifts: int
    created_by: str
    created_at: Optional[datetime] = None
