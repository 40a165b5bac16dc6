from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an entity referenced by id does not exist."""


class ShiftConflictError(DomainError):
    """Raised by services when a shift collides with the employee's active shifts."""

    def __init__(self, message: str, *, conflicting_dates: Sequence[str] = ()):
        super().__init__(message)
        self.conflicting_dates = list(conflicting_dates)
