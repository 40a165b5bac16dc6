from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.constants import DELETED_LOCATION_LABEL
from ..core.exceptions import NotFoundError
from .model import Location
from .repository import LocationRepository

logger = logging.getLogger(__name__)


class LocationService:
    def __init__(self, locations: LocationRepository):
        self._locations = locations

    def create(self, *, name: str, address: Optional[str] = None) -> int:
        location_id = self._locations.create(name=require_non_empty(name, "Nombre del local"), address=optional_text(address))
        logger.info("Location %s created", location_id)
        return location_id

    def update(self, *, location_id: int, name: str, address: Optional[str] = None) -> None:
        ok = self._locations.update(
            location_id=int(location_id),
            name=require_non_empty(name, "Nombre del local"),
            address=optional_text(address),
        )
        if not ok:
            raise NotFoundError("Local no existe")

    def delete(self, *, location_id: int) -> None:
        if not self._locations.delete(location_id=int(location_id)):
            raise NotFoundError("Local no existe")
        logger.info("Location %s deleted", location_id)

    def find(self, location_id: int) -> Optional[Location]:
        return self._locations.get_by_id(int(location_id))

    def list_all(self) -> Sequence[Location]:
        return self._locations.list_all()

    def names_by_id(self) -> Dict[int, str]:
        return {loc.location_id: loc.name for loc in self._locations.list_all()}

    def label_for(self, location_id: int) -> str:
        location = self.find(location_id)
        return location.name if location else DELETED_LOCATION_LABEL
