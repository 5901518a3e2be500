from __future__ import annotations

from datetime import date, datetime
from typing import Union

DayLike = Union[date, datetime, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def as_day(value: DayLike) -> date:
    """Normalize a date, datetime or ISO string to its calendar day.

    Stored timestamps often carry a time component (and sometimes an offset);
    only the calendar day they name is significant for day arithmetic.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if len(text) > 10:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        return parse_iso_date(text)
    raise TypeError(f"Unsupported day value: {value!r}")

