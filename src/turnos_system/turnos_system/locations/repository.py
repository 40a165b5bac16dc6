from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Location


class LocationRepository(Protocol):
    def get_by_id(self, location_id: int) -> Optional[Location]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Location]:
        raise NotImplementedError

    def create(self, *, name: str, address: Optional[str] = None) -> int:
        raise NotImplementedError

    def update(self, *, location_id: int, name: str, address: Optional[str] = None) -> bool:
        raise NotImplementedError

    def delete(self, *, location_id: int) -> bool:
        raise NotImplementedError
