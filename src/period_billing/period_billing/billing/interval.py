"""Inclusive calendar-day interval arithmetic."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import DayLike, as_day


def clamp_to_period(
    span_start: DayLike,
    span_end: DayLike,
    period_start: DayLike,
    period_end: DayLike,
) -> Optional[tuple[date, date]]:
    """Return the part of [span_start, span_end] inside the period, or None."""
    start = max(as_day(span_start), as_day(period_start))
    end = min(as_day(span_end), as_day(period_end))
    if start > end:
        return None
    return start, end


def overlap_days(span_start: DayLike, span_end: DayLike, period_start: DayLike, period_end: DayLike) -> int:
    """Number of calendar days shared by the two inclusive spans (0 if disjoint)."""
    clamped = clamp_to_period(span_start, span_end, period_start, period_end)
    if clamped is None:
        return 0
    start, end = clamped
    return (end - start).days + 1


def leave_days_in_period(spans: Iterable[tuple[DayLike, DayLike]], period_start: DayLike, period_end: DayLike) -> int:
    """Distinct days of the period covered by at least one span.

    Overlapping spans count shared days once.
    """
    clamped = sorted(
        c for c in (clamp_to_period(s, e, period_start, period_end) for s, e in spans) if c is not None
    )

    total = 0
    current: Optional[tuple[date, date]] = None
    for start, end in clamped:
        if current is None:
            current = (start, end)
        elif start <= current[1]:
            current = (current[0], max(current[1], end))
        else:
            total += (current[1] - current[0]).days + 1
            current = (start, end)
    if current is not None:
        total += (current[1] - current[0]).days + 1
    return total
