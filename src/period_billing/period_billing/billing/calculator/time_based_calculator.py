from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ...core.constants import HOURS_METRIC_LABEL
from ...core.exceptions import FormulaError
from ...projects.model import Project
from ...worklogs.model import WorkLogEntry
from .base import BillingCalculator, format_number


class TimeBasedCalculator(BillingCalculator):
    """Hours * rate_per_hour."""

    def validate(self, project: Project) -> None:
        if project.divisor is not None or project.multiplier is not None:
            raise FormulaError(
                f"Project {project.project_id} is time-based but carries unit-based fields",
                project_id=project.project_id,
            )
        if project.rate_per_hour is None or project.rate_per_hour < 0:
            raise FormulaError(
                f"Project {project.project_id} has no valid hourly rate",
                project_id=project.project_id,
            )

    def billable_quantity(self, entry: WorkLogEntry) -> Optional[Decimal]:
        if entry.hours_worked is None or entry.hours_worked <= 0:
            return None
        return entry.hours_worked

    def raw_amount(self, project: Project, quantity: Decimal) -> Decimal:
        return quantity * project.rate_per_hour

    def metric_label(self, project: Project) -> str:
        return HOURS_METRIC_LABEL

    def describe(self, project: Project) -> str:
        return f"Hours * {format_number(project.rate_per_hour)}"
