from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import NewSnapshot, Snapshot


class SnapshotRepository(Protocol):
    def create(self, snapshot: NewSnapshot) -> int:
        """Persist the snapshot with its embedded shift copies. Returns snapshot_id."""

        raise NotImplementedError

    def get_by_id(self, snapshot_id: int) -> Optional[Snapshot]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Snapshot]:
        """Newest week first."""

        raise NotImplementedError

    def delete(self, *, snapshot_id: int) -> bool:
        raise NotImplementedError
