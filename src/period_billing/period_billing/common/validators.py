from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import DayLike, as_day


def require_day(value: Optional[DayLike], field_name: str) -> date:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")
    try:
        return as_day(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is not a valid date (YYYY-MM-DD)")
