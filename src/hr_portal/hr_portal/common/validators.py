from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_iso_date(value: Any, field_name: str) -> str:
    v = require_non_empty(value, field_name)
    try:
        return parse_iso_date(v[:10]).isoformat()
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")


def optional_number(value: Any, field_name: str) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")


def clamp_int(value: Any, *, default: int, minimum: int, maximum: Optional[int] = None) -> int:
    """Parse a query-string integer; garbage or zero falls back to ``default``."""
    try:
        n = int(value)
    except (TypeError, ValueError):
        n = 0
    if n == 0:
        n = default
    n = max(n, minimum)
    if maximum is not None:
        n = min(n, maximum)
    return n
