from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.enums import BillingModel, FailurePolicy
from ..core.exceptions import DomainError
from ..employees.repository import EmployeeRepository
from ..projects.repository import ProjectRepository
from .aggregator import PeriodAggregator
from .model import EmployeeFailure, Period, SummaryBatch

logger = logging.getLogger(__name__)


class SummaryBuilder:
    def __init__(
        self,
        employees: EmployeeRepository,
        projects: ProjectRepository,
        aggregator: PeriodAggregator,
        *,
        billing_models: Optional[Iterable[BillingModel]] = None,
    ):
        self._employees = employees
        self._projects = projects
        self._aggregator = aggregator
        self._billing_models = frozenset(billing_models or BillingModel)

    def build(self, period: Period, *, policy: FailurePolicy = FailurePolicy.ABORT) -> SummaryBatch:
        """Aggregate every eligible employee and order by grand total, highest first.

        Under ABORT the first failing employee aborts the whole batch. Under
        ISOLATE the failure is recorded and the remaining employees are still
        aggregated.
        """
        employees = self._employees.list_eligible()
        projects = {p.project_id: p for p in self._projects.list_projects() if p.billing_model in self._billing_models}

        summaries = []
        failures = []
        for employee in employees:
            try:
                summary = self._aggregator.aggregate(employee, period, projects)
            except DomainError as exc:
                if policy == FailurePolicy.ABORT:
                    logger.error("Billing aggregation aborted at employee %s: %s", employee.employee_id, exc)
                    raise
                logger.warning("Billing aggregation failed for employee %s: %s", employee.employee_id, exc)
                failures.append(EmployeeFailure(employee_id=employee.employee_id, reason=str(exc), stage="aggregate"))
                continue

            if summary is not None:
                summaries.append(summary)

        summaries.sort(key=lambda s: (-s.grand_total, s.employee_name, s.employee_id))

        if not summaries:
            logger.info("No billable activity between %s and %s", period.start, period.end)
        else:
            logger.info(
                "Computed %d billing summaries between %s and %s (%d failed)",
                len(summaries),
                period.start,
                period.end,
                len(failures),
            )
        return SummaryBatch(summaries=summaries, failures=failures)
