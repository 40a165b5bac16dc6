from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_hhmm


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} no es válido")
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    return (value or "").strip() or None


def require_positive_id(value: int, field_name: str) -> int:
    try:
        value = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} no es válido")
    if value <= 0:
        raise ValidationError(f"{field_name} no es válido")
    return value


def require_hhmm(value: str, field_name: str) -> str:
    try:
        minutes = parse_hhmm(value)
    except ValueError:
        raise ValidationError(f"{field_name} debe tener formato HH:MM")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def require_time_order(start: str, end: str) -> None:
    if parse_hhmm(start) >= parse_hhmm(end):
        raise ValidationError("La hora de inicio debe ser anterior a la hora de fin")
