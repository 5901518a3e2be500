from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional

import pytest

from period_billing.attendance.model import AttendanceRecord
from period_billing.billing.aggregator import PeriodAggregator
from period_billing.billing.service import BillingSettlementService
from period_billing.billing.summary_builder import SummaryBuilder
from period_billing.core.enums import BillingModel, FailurePolicy, RequestStatus, Role
from period_billing.core.exceptions import DuplicateSettlementError
from period_billing.employees.model import Employee
from period_billing.leave.model import LeaveRequest
from period_billing.projects.model import Project
from period_billing.settlements.service import SettlementFinalizer
from period_billing.worklogs.model import WorkLogEntry


class InMemoryEmployees:
    def __init__(self):
        self.employees: list[Employee] = []

    def list_eligible(self, *, role: Role = Role.EMPLOYEE):
        return [e for e in self.employees if e.role == role and e.is_active]


class InMemoryProjects:
    def __init__(self):
        self.projects: list[Project] = []

    def list_projects(self):
        return list(self.projects)


class _FailingReads:
    def __init__(self):
        self.fail_for: set[str] = set()
        self.calls: list[str] = []

    def _check(self, employee_id: str) -> None:
        self.calls.append(employee_id)
        if employee_id in self.fail_for:
            raise ConnectionError(f"backend unavailable for {employee_id}")


class InMemoryWorkLogs(_FailingReads):
    def __init__(self):
        super().__init__()
        self.entries: list[WorkLogEntry] = []

    def list_for_employee(self, employee_id, *, start_date, end_date):
        self._check(employee_id)
        return [
            e for e in self.entries if e.employee_id == employee_id and start_date <= e.work_date <= end_date
        ]


class InMemoryAttendance(_FailingReads):
    def __init__(self):
        super().__init__()
        self.records: list[AttendanceRecord] = []

    def list_for_employee(self, employee_id, *, start_date, end_date):
        self._check(employee_id)
        return [
            r for r in self.records if r.employee_id == employee_id and start_date <= r.work_date <= end_date
        ]


class InMemoryLeave(_FailingReads):
    def __init__(self):
        super().__init__()
        self.requests: list[LeaveRequest] = []

    def list_for_employee(self, employee_id, *, status, start_date, end_date):
        self._check(employee_id)
        return [
            r
            for r in self.requests
            if r.employee_id == employee_id
            and r.status == status
            and r.start_date <= end_date
            and r.end_date >= start_date
        ]


class InMemorySettlements:
    def __init__(self):
        self.by_key: dict = {}
        self.fail_for: set[str] = set()
        self.fail_mark_for: set[str] = set()
        self._next_id = 1

    def create(self, record):
        if record.employee_id in self.fail_for:
            raise RuntimeError(f"insert failed for {record.employee_id}")
        if record.settlement_key in self.by_key:
            raise DuplicateSettlementError(record.settlement_key)
        stored = replace(record, settlement_id=self._next_id, created_at=datetime(2024, 3, 1, 9, 0))
        self._next_id += 1
        self.by_key[record.settlement_key] = stored
        return stored

    def get_by_key(self, settlement_key):
        return self.by_key.get(settlement_key)

    def mark_notified(self, settlement_key):
        if self.by_key[settlement_key].employee_id in self.fail_mark_for:
            raise RuntimeError("update failed")
        self.by_key[settlement_key] = replace(self.by_key[settlement_key], notified_at=datetime(2024, 3, 1, 9, 5))

    def for_employee(self, employee_id: str):
        return [r for r in self.by_key.values() if r.employee_id == employee_id]


class RecordingNotifier:
    def __init__(self):
        self.sent: list[tuple[str, str]] = []
        self.fail_for: set[str] = set()

    def send(self, recipient_id, message):
        if recipient_id in self.fail_for:
            raise RuntimeError("push gateway down")
        self.sent.append((recipient_id, message))


@dataclass
class BillingWorld:
    """Everything the engine reads from and writes to, in memory."""

    employees: InMemoryEmployees = field(default_factory=InMemoryEmployees)
    projects: InMemoryProjects = field(default_factory=InMemoryProjects)
    work_logs: InMemoryWorkLogs = field(default_factory=InMemoryWorkLogs)
    attendance: InMemoryAttendance = field(default_factory=InMemoryAttendance)
    leave: InMemoryLeave = field(default_factory=InMemoryLeave)
    settlements: InMemorySettlements = field(default_factory=InMemorySettlements)
    notifier: RecordingNotifier = field(default_factory=RecordingNotifier)

    def add_employee(self, employee_id: str, full_name: Optional[str] = None, **kwargs) -> Employee:
        employee = Employee(employee_id=employee_id, full_name=full_name or employee_id.upper(), **kwargs)
        self.employees.employees.append(employee)
        return employee

    def add_unit_project(self, project_id: str, *, divisor, multiplier, label: str = "Records") -> Project:
        project = Project(
            project_id=project_id,
            name=project_id.title(),
            billing_model=BillingModel.UNIT_BASED,
            metric_label=label,
            divisor=Decimal(str(divisor)),
            multiplier=Decimal(str(multiplier)),
        )
        self.projects.projects.append(project)
        return project

    def add_hourly_project(self, project_id: str, *, rate) -> Project:
        project = Project(
            project_id=project_id,
            name=project_id.title(),
            billing_model=BillingModel.TIME_BASED,
            rate_per_hour=Decimal(str(rate)),
        )
        self.projects.projects.append(project)
        return project

    def log(self, employee_id: str, project_id: str, work_date: date, *, units=None, hours=None) -> None:
        self.work_logs.entries.append(
            WorkLogEntry(
                employee_id=employee_id,
                project_id=project_id,
                work_date=work_date,
                hours_worked=None if hours is None else Decimal(str(hours)),
                achieved_count=None if units is None else Decimal(str(units)),
            )
        )

    def clock_in(self, employee_id: str, work_date: date, *, hour: int = 9) -> None:
        self.attendance.records.append(
            AttendanceRecord(
                employee_id=employee_id,
                work_date=work_date,
                clock_in=datetime.combine(work_date, time(hour, 0)),
                clock_out=datetime.combine(work_date, time(17, 0)),
            )
        )

    def add_leave(self, employee_id: str, start: date, end: date, status: RequestStatus = RequestStatus.APPROVED) -> None:
        self.leave.requests.append(
            LeaveRequest(
                request_id=len(self.leave.requests) + 1,
                employee_id=employee_id,
                start_date=start,
                end_date=end,
                status=status,
            )
        )

    def aggregator(self) -> PeriodAggregator:
        return PeriodAggregator(self.work_logs, self.attendance, self.leave)

    def builder(self, **kwargs) -> SummaryBuilder:
        return SummaryBuilder(self.employees, self.projects, self.aggregator(), **kwargs)

    def finalizer(self) -> SettlementFinalizer:
        return SettlementFinalizer(self.settlements, self.notifier)

    def service(self, *, failure_policy: FailurePolicy = FailurePolicy.ABORT) -> BillingSettlementService:
        return BillingSettlementService(self.builder(), self.finalizer(), failure_policy=failure_policy)


@pytest.fixture
def world() -> BillingWorld:
    return BillingWorld()


@pytest.fixture
def feb_2024():
    return date(2024, 2, 1), date(2024, 2, 29)
