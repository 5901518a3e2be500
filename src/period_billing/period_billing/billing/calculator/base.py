from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ...core.constants import AMOUNT_QUANTUM
from ...projects.model import Project
from ...worklogs.model import WorkLogEntry


def round_money(value: Decimal) -> Decimal:
    return value.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)


def format_number(value: Decimal) -> str:
    """Render a Decimal without exponent or trailing zeros (1000.0000 -> 1000)."""
    return format(value.normalize(), "f")


class BillingCalculator(ABC):
    """Calculator interface (Strategy Pattern for billing models)."""

    @abstractmethod
    def validate(self, project: Project) -> None:
        """Raise FormulaError when the project cannot be billed by this model."""

        raise NotImplementedError

    @abstractmethod
    def billable_quantity(self, entry: WorkLogEntry) -> Optional[Decimal]:
        """Quantity this entry contributes, or None when it contributes nothing."""

        raise NotImplementedError

    @abstractmethod
    def raw_amount(self, project: Project, quantity: Decimal) -> Decimal:
        raise NotImplementedError

    @abstractmethod
    def metric_label(self, project: Project) -> str:
        raise NotImplementedError

    @abstractmethod
    def describe(self, project: Project) -> str:
        raise NotImplementedError

    def amount(self, project: Project, quantity: Decimal) -> Decimal:
        """Amount for the period's aggregated quantity, rounded once to cents."""
        self.validate(project)
        return round_money(self.raw_amount(project, quantity))
