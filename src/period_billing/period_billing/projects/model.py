from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..core.enums import BillingModel


@dataclass(frozen=True)
class Project:
    """Domain entity: a project and its billing configuration.

    Time-based projects carry ``rate_per_hour``; unit-based projects carry
    ``metric_label``, ``divisor`` and ``multiplier``. The two sets are
    mutually exclusive.
    """

    project_id: str
    name: str
    billing_model: BillingModel
    rate_per_hour: Optional[Decimal] = None
    metric_label: Optional[str] = None
    divisor: Optional[Decimal] = None
    multiplier: Optional[Decimal] = None

    @property
    def is_unit_based(self) -> bool:
        return self.billing_model == BillingModel.UNIT_BASED
