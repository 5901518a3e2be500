from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from typing import Mapping, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..core.constants import DEFAULT_FETCH_WORKERS
from ..core.enums import RequestStatus
from ..core.exceptions import RetrievalError
from ..employees.model import Employee
from ..leave.model import LeaveRequest
from ..leave.repository import LeaveRepository
from ..projects.model import Project
from ..worklogs.model import WorkLogEntry
from ..worklogs.repository import WorkLogRepository
from .formula import FormulaEvaluator
from .interval import leave_days_in_period
from .model import AttendanceSummary, EmployeePeriodSummary, Period, ProjectEarning

logger = logging.getLogger(__name__)


def count_presence_days(records: Sequence[AttendanceRecord]) -> int:
    """Distinct dates with at least one clock-in."""
    return len({r.work_date for r in records if r.clock_in is not None})


class PeriodAggregator:
    """Folds one employee's work logs, attendance and leave into a summary."""

    def __init__(
        self,
        work_logs: WorkLogRepository,
        attendance: AttendanceRepository,
        leave: LeaveRepository,
        *,
        formula: Optional[FormulaEvaluator] = None,
        max_workers: int = DEFAULT_FETCH_WORKERS,
    ):
        self._work_logs = work_logs
        self._attendance = attendance
        self._leave = leave
        self._formula = formula or FormulaEvaluator()
        self._max_workers = max(1, int(max_workers))

    def _fetch(
        self, employee_id: str, period: Period
    ) -> tuple[Sequence[WorkLogEntry], Sequence[AttendanceRecord], Sequence[LeaveRequest]]:
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            futures = {
                "work_logs": pool.submit(
                    self._work_logs.list_for_employee, employee_id, start_date=period.start, end_date=period.end
                ),
                "attendance": pool.submit(
                    self._attendance.list_for_employee, employee_id, start_date=period.start, end_date=period.end
                ),
                "leave": pool.submit(
                    self._leave.list_for_employee,
                    employee_id,
                    status=RequestStatus.APPROVED,
                    start_date=period.start,
                    end_date=period.end,
                ),
            }

            results = {}
            for source, future in futures.items():
                try:
                    results[source] = future.result()
                except Exception as exc:
                    raise RetrievalError(
                        f"Failed to load {source} for employee {employee_id}: {exc}",
                        employee_id=employee_id,
                        source=source,
                    ) from exc

        return results["work_logs"], results["attendance"], results["leave"]

    def _project_earnings(
        self, entries: Sequence[WorkLogEntry], projects: Mapping[str, Project]
    ) -> tuple[ProjectEarning, ...]:
        totals: dict[str, Decimal] = {}
        for entry in entries:
            project = projects.get(entry.project_id)
            if project is None:
                logger.debug("Skipping work log on non-billing project %s", entry.project_id)
                continue
            quantity = self._formula.billable_quantity(project, entry)
            if quantity is None:
                continue
            totals[project.project_id] = totals.get(project.project_id, Decimal("0")) + quantity

        earnings = [self._formula.earning(projects[pid], quantity) for pid, quantity in totals.items()]
        earnings.sort(key=lambda e: (e.project_name, e.project_id))
        return tuple(earnings)

    def aggregate(
        self,
        employee: Employee,
        period: Period,
        projects: Mapping[str, Project],
    ) -> Optional[EmployeePeriodSummary]:
        """Summary for ``employee`` over ``period``, or None if the employee was idle.

        ``projects`` is the billing directory keyed by project id; work on any
        other project is ignored.
        """
        entries, attendance, leave = self._fetch(employee.employee_id, period)

        days_present = count_presence_days(attendance)
        days_on_leave = leave_days_in_period(
            ((r.start_date, r.end_date) for r in leave if r.status == RequestStatus.APPROVED),
            period.start,
            period.end,
        )
        details = self._project_earnings(entries, projects)

        if not details and days_present == 0 and days_on_leave == 0:
            return None

        return EmployeePeriodSummary(
            employee_id=employee.employee_id,
            employee_name=employee.full_name,
            period=period,
            details=details,
            attendance=AttendanceSummary(days_present=days_present, days_on_leave=days_on_leave),
            grand_total=sum((d.amount for d in details), Decimal("0.00")),
        )
