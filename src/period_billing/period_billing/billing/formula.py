from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from ..core.enums import BillingModel
from ..core.exceptions import FormulaError
from ..projects.model import Project
from ..worklogs.model import WorkLogEntry
from .calculator.base import BillingCalculator
from .calculator.time_based_calculator import TimeBasedCalculator
from .calculator.unit_based_calculator import UnitBasedCalculator
from .model import ProjectEarning


@dataclass
class FormulaEvaluator:
    """Factory Pattern: pick the calculator for a project's billing model."""

    calculators: dict[BillingModel, BillingCalculator] = field(
        default_factory=lambda: {
            BillingModel.TIME_BASED: TimeBasedCalculator(),
            BillingModel.UNIT_BASED: UnitBasedCalculator(),
        }
    )

    def for_project(self, project: Project) -> BillingCalculator:
        calculator = self.calculators.get(project.billing_model)
        if calculator is None:
            raise FormulaError(
                f"Unsupported billing model for project {project.project_id}: {project.billing_model}",
                project_id=project.project_id,
            )
        return calculator

    def billable_quantity(self, project: Project, entry: WorkLogEntry) -> Optional[Decimal]:
        return self.for_project(project).billable_quantity(entry)

    def evaluate(self, project: Project, quantity: Decimal) -> Decimal:
        return self.for_project(project).amount(project, quantity)

    def earning(self, project: Project, quantity: Decimal) -> ProjectEarning:
        calculator = self.for_project(project)
        amount = calculator.amount(project, quantity)
        return ProjectEarning(
            project_id=project.project_id,
            project_name=project.name,
            billing_model=project.billing_model,
            quantity=quantity,
            metric_label=calculator.metric_label(project),
            formula_applied=calculator.describe(project),
            amount=amount,
        )
