from __future__ import annotations

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_date_key(value: str, field_name: str = "date") -> str:
    """Accept only calendar dates in YYYY-MM-DD form (the attendance key)."""
    try:
        return parse_iso_date(value).isoformat()
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date") from None
