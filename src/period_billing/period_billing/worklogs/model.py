from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class WorkLogEntry:
    """One project line of a daily work report.

    Several entries for the same employee/date/project are revisions of the
    same day's work and are summed by billing.
    """

    employee_id: str
    project_id: str
    work_date: date
    hours_worked: Optional[Decimal] = None
    achieved_count: Optional[Decimal] = None
