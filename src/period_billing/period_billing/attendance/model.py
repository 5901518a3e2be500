from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one clock-in/clock-out session."""

    employee_id: str
    work_date: date
    clock_in: Optional[datetime]
    clock_out: Optional[datetime] = None
