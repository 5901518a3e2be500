from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import DayLike
from ..core.enums import FailurePolicy
from ..core.exceptions import ValidationError
from ..settlements.model import FinalizeResult
from ..settlements.service import SettlementFinalizer
from .model import EmployeePeriodSummary, Period, SummaryBatch
from .summary_builder import SummaryBuilder

logger = logging.getLogger(__name__)


class BillingSettlementService:
    """Entry point used by the review screen: compute, review, finalize.

    Holds no per-run state; selection and display state belong to the caller.
    """

    def __init__(
        self,
        builder: SummaryBuilder,
        finalizer: SettlementFinalizer,
        *,
        failure_policy: FailurePolicy = FailurePolicy.ABORT,
    ):
        self._builder = builder
        self._finalizer = finalizer
        self._failure_policy = failure_policy

    def compute_summaries(
        self, period_start: Optional[DayLike], period_end: Optional[DayLike]
    ) -> list[EmployeePeriodSummary]:
        """All-or-nothing computation: any employee failure raises."""
        period = Period.of(period_start, period_end)
        return self._builder.build(period, policy=FailurePolicy.ABORT).summaries

    def compute_summary_batch(
        self,
        period_start: Optional[DayLike],
        period_end: Optional[DayLike],
        *,
        policy: Optional[FailurePolicy] = None,
    ) -> SummaryBatch:
        period = Period.of(period_start, period_end)
        return self._builder.build(period, policy=policy or self._failure_policy)

    def finalize(
        self,
        summaries: Sequence[EmployeePeriodSummary],
        *,
        policy: Optional[FailurePolicy] = None,
    ) -> FinalizeResult:
        if not any(s.is_billable for s in summaries):
            raise ValidationError("No calculations with earnings to finalize")

        policy = policy or self._failure_policy
        logger.info("Finalizing %d billing summaries (policy=%s)", len(summaries), policy.value)
        return self._finalizer.finalize(summaries, policy=policy)
