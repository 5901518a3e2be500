from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ...core.constants import DEFAULT_METRIC_LABEL
from ...core.exceptions import FormulaError
from ...projects.model import Project
from ...worklogs.model import WorkLogEntry
from .base import BillingCalculator, format_number


class UnitBasedCalculator(BillingCalculator):
    """(total achieved units / divisor) * multiplier.

    A zero or missing divisor is a data-integrity error, never "0 units".
    """

    def validate(self, project: Project) -> None:
        if project.rate_per_hour is not None:
            raise FormulaError(
                f"Project {project.project_id} is unit-based but carries an hourly rate",
                project_id=project.project_id,
            )
        if project.divisor is None or project.divisor <= 0:
            raise FormulaError(
                f"Project {project.project_id} has no valid divisor",
                project_id=project.project_id,
            )
        if project.multiplier is None or project.multiplier <= 0:
            raise FormulaError(
                f"Project {project.project_id} has no valid multiplier",
                project_id=project.project_id,
            )

    def billable_quantity(self, entry: WorkLogEntry) -> Optional[Decimal]:
        # Hours on a unit-based project are never billed.
        if entry.achieved_count is None or entry.achieved_count <= 0:
            return None
        return entry.achieved_count

    def raw_amount(self, project: Project, quantity: Decimal) -> Decimal:
        return (quantity / project.divisor) * project.multiplier

    def metric_label(self, project: Project) -> str:
        return project.metric_label or DEFAULT_METRIC_LABEL

    def describe(self, project: Project) -> str:
        return f"(Achieved / {format_number(project.divisor)}) * {format_number(project.multiplier)}"
