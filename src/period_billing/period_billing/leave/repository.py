from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import RequestStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def list_for_employee(
        self,
        employee_id: str,
        *,
        status: RequestStatus,
        start_date: date,
        end_date: date,
    ) -> Sequence[LeaveRequest]:
        """Requests in ``status`` whose span overlaps [start_date, end_date]."""

        raise NotImplementedError
