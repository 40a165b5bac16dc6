from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Location:
    """Domain entity: a business location (local) where shifts take place."""

    location_id: int
    name: str
    address: Optional[str] = None
