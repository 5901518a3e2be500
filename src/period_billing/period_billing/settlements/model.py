from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..billing.model import AttendanceSummary, EmployeeFailure, Period, ProjectEarning
from ..core.constants import SUMMARY_PROJECT_ID, SUMMARY_PROJECT_NAME
from ..core.enums import OutcomeKind, SettlementStatus


def settlement_key(employee_id: str, period_start: date, period_end: date) -> str:
    """Deterministic identity of "this employee's settlement for this period"."""
    return f"{employee_id}:{period_start.isoformat()}:{period_end.isoformat()}"


@dataclass(frozen=True)
class SettlementRecord:
    """Persisted outcome of finalizing a summary.

    The breakdown is always a list, possibly of one project. The primary
    project is derived from it for display only.
    """

    settlement_key: str
    employee_id: str
    period: Period
    details: tuple[ProjectEarning, ...]
    attendance: AttendanceSummary
    total_amount: Decimal
    status: SettlementStatus = SettlementStatus.PENDING
    notes: Optional[str] = None
    settlement_id: Optional[int] = None
    created_at: Optional[datetime] = None
    notified_at: Optional[datetime] = None

    @property
    def is_notified(self) -> bool:
        return self.notified_at is not None

    @property
    def primary_project_id(self) -> str:
        return self.details[0].project_id if self.details else SUMMARY_PROJECT_ID

    @property
    def primary_project_name(self) -> str:
        return self.details[0].project_name if self.details else SUMMARY_PROJECT_NAME

    def to_dict(self) -> dict:
        return {
            "settlement_id": self.settlement_id,
            "settlement_key": self.settlement_key,
            "employee_id": self.employee_id,
            **self.period.to_dict(),
            "primary_project_id": self.primary_project_id,
            "primary_project_name": self.primary_project_name,
            "details": [d.to_dict() for d in self.details],
            "attendance": self.attendance.to_dict(),
            "total_amount": str(self.total_amount),
            "status": self.status.value,
            "notes": self.notes,
            "notified_at": self.notified_at.isoformat() if self.notified_at else None,
        }


@dataclass(frozen=True)
class EmployeeOutcome:
    """Result of finalizing a single summary.

    ``record`` is set for SETTLED, ``failure`` for FAILED.
    """

    employee_id: str
    kind: OutcomeKind
    record: Optional[SettlementRecord] = None
    failure: Optional[EmployeeFailure] = None

    @classmethod
    def settled(cls, record: SettlementRecord) -> "EmployeeOutcome":
        return cls(employee_id=record.employee_id, kind=OutcomeKind.SETTLED, record=record)

    @classmethod
    def already_settled(cls, employee_id: str) -> "EmployeeOutcome":
        return cls(employee_id=employee_id, kind=OutcomeKind.ALREADY_SETTLED)

    @classmethod
    def failed(cls, employee_id: str, reason: str, stage: str) -> "EmployeeOutcome":
        return cls(
            employee_id=employee_id,
            kind=OutcomeKind.FAILED,
            failure=EmployeeFailure(employee_id=employee_id, reason=reason, stage=stage),
        )


@dataclass
class FinalizeResult:
    """Outcome of one finalize run.

    ``succeeded_count`` below the number of billable inputs means the run
    stopped early or some employees failed; ``failures`` says which.
    """

    succeeded: list[SettlementRecord] = field(default_factory=list)
    already_settled: list[str] = field(default_factory=list)
    failures: list[EmployeeFailure] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def add(self, outcome: EmployeeOutcome) -> None:
        if outcome.kind == OutcomeKind.SETTLED:
            self.succeeded.append(outcome.record)
        elif outcome.kind == OutcomeKind.ALREADY_SETTLED:
            self.already_settled.append(outcome.employee_id)
        else:
            self.failures.append(outcome.failure)

    @property
    def succeeded_count(self) -> int:
        return len(self.succeeded)

    @property
    def failed_at_employee_id(self) -> Optional[str]:
        return self.failures[0].employee_id if self.failures else None

    @property
    def is_complete(self) -> bool:
        return not self.failures

    def to_dict(self) -> dict:
        return {
            "succeeded_count": self.succeeded_count,
            "failed_at_employee_id": self.failed_at_employee_id,
            "settlements": [r.to_dict() for r in self.succeeded],
            "already_settled": list(self.already_settled),
            "failures": [f.to_dict() for f in self.failures],
            "skipped": list(self.skipped),
        }
