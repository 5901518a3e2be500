from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import RequestStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    employee_id: str
    start_date: date
    end_date: date
    status: RequestStatus
