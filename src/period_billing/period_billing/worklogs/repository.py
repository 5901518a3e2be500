from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import WorkLogEntry


class WorkLogRepository(Protocol):
    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date) -> Sequence[WorkLogEntry]:
        """All entries dated within [start_date, end_date]."""

        raise NotImplementedError
