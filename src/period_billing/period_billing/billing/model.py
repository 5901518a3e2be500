from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..common.datetime_utils import DayLike
from ..common.validators import require_day
from ..core.constants import AMOUNT_QUANTUM
from ..core.enums import BillingModel
from ..core.exceptions import ValidationError


def parse_amount(value: Any, field_name: str) -> Decimal:
    """Money posted back by a client: finite, non-negative, whole cents."""
    amount = Decimal(str(value))
    if not amount.is_finite() or amount < 0:
        raise ValidationError(f"{field_name} must be a non-negative amount")
    if amount != amount.quantize(AMOUNT_QUANTUM):
        raise ValidationError(f"{field_name} must be rounded to {AMOUNT_QUANTUM}")
    return amount


@dataclass(frozen=True)
class Period:
    """Inclusive settlement period."""

    start: date
    end: date

    @classmethod
    def of(cls, start: Optional[DayLike], end: Optional[DayLike]) -> "Period":
        start_day = require_day(start, "Start date")
        end_day = require_day(end, "End date")
        if start_day > end_day:
            raise ValidationError("Start date cannot be after end date")
        return cls(start=start_day, end=end_day)

    def to_dict(self) -> dict:
        return {"start_date": self.start.isoformat(), "end_date": self.end.isoformat()}


@dataclass(frozen=True)
class ProjectEarning:
    """Earnings of one employee on one project over a period."""

    project_id: str
    project_name: str
    billing_model: BillingModel
    quantity: Decimal
    metric_label: str
    formula_applied: str
    amount: Decimal

    def to_dict(self) -> dict:
        return {
            "project_id": self.project_id,
            "project_name": self.project_name,
            "billing_model": self.billing_model.value,
            "quantity": str(self.quantity),
            "metric_label": self.metric_label,
            "formula_applied": self.formula_applied,
            "amount": str(self.amount),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProjectEarning":
        return cls(
            project_id=str(data["project_id"]),
            project_name=str(data["project_name"]),
            billing_model=BillingModel(data["billing_model"]),
            quantity=Decimal(str(data["quantity"])),
            metric_label=str(data.get("metric_label") or ""),
            formula_applied=str(data.get("formula_applied") or ""),
            amount=parse_amount(data["amount"], "amount"),
        )


@dataclass(frozen=True)
class AttendanceSummary:
    days_present: int = 0
    days_on_leave: int = 0

    def to_dict(self) -> dict:
        return {"days_present": self.days_present, "days_on_leave": self.days_on_leave}


@dataclass(frozen=True)
class EmployeePeriodSummary:
    """Transient aggregation result for one employee over one period.

    ``grand_total`` is the sum of the already rounded ``details`` amounts.
    """

    employee_id: str
    employee_name: str
    period: Period
    details: tuple[ProjectEarning, ...] = ()
    attendance: AttendanceSummary = field(default_factory=AttendanceSummary)
    grand_total: Decimal = Decimal("0.00")

    @property
    def is_billable(self) -> bool:
        """Leave-only or presence-only summaries are reviewed but never settled."""
        return self.grand_total > 0 or bool(self.details)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            **self.period.to_dict(),
            "details": [d.to_dict() for d in self.details],
            "attendance": self.attendance.to_dict(),
            "grand_total": str(self.grand_total),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmployeePeriodSummary":
        attendance = data.get("attendance") or {}
        details = tuple(ProjectEarning.from_dict(d) for d in data.get("details") or [])
        grand_total = parse_amount(data.get("grand_total", "0.00"), "grand_total")
        if grand_total != sum((d.amount for d in details), Decimal("0.00")):
            raise ValidationError(
                f"grand_total {grand_total} does not match the project amounts of employee {data.get('employee_id')}"
            )

        return cls(
            employee_id=str(data["employee_id"]),
            employee_name=str(data.get("employee_name") or ""),
            period=Period.of(data.get("start_date"), data.get("end_date")),
            details=details,
            attendance=AttendanceSummary(
                days_present=int(attendance.get("days_present", 0)),
                days_on_leave=int(attendance.get("days_on_leave", 0)),
            ),
            grand_total=grand_total,
        )


@dataclass(frozen=True)
class EmployeeFailure:
    employee_id: str
    reason: str
    stage: Optional[str] = None

    def to_dict(self) -> dict:
        return {"employee_id": self.employee_id, "reason": self.reason, "stage": self.stage}


@dataclass(frozen=True)
class SummaryBatch:
    summaries: list[EmployeePeriodSummary]
    failures: list[EmployeeFailure] = field(default_factory=list)
