from __future__ import annotations

import logging
from typing import Sequence

from ..billing.model import EmployeePeriodSummary
from ..core.constants import DEFAULT_CURRENCY_SYMBOL
from ..core.enums import FailurePolicy, OutcomeKind, SettlementStatus
from ..core.exceptions import DuplicateSettlementError
from ..notifications.notifier import Notifier
from .model import EmployeeOutcome, FinalizeResult, SettlementRecord, settlement_key
from .repository import SettlementRepository

logger = logging.getLogger(__name__)


def build_notification_message(summary: EmployeePeriodSummary, *, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    period = summary.period
    return (
        f"Billing for the period {period.start.isoformat()} to {period.end.isoformat()} has been processed.\n"
        f"Grand Total: {currency_symbol}{summary.grand_total:.2f}.\n"
        f"Attendance: {summary.attendance.days_present} days present, "
        f"{summary.attendance.days_on_leave} days on leave.\n"
        'Please check "My Billing" for a detailed breakdown.'
    )


class SettlementFinalizer:
    def __init__(
        self,
        settlements: SettlementRepository,
        notifier: Notifier,
        *,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    ):
        self._settlements = settlements
        self._notifier = notifier
        self._currency_symbol = currency_symbol

    @staticmethod
    def build_record(summary: EmployeePeriodSummary) -> SettlementRecord:
        period = summary.period
        return SettlementRecord(
            settlement_key=settlement_key(summary.employee_id, period.start, period.end),
            employee_id=summary.employee_id,
            period=period,
            details=tuple(summary.details),
            attendance=summary.attendance,
            total_amount=summary.grand_total,
            status=SettlementStatus.PENDING,
            notes=(
                f"Automated billing summary for {summary.employee_name} "
                f"for period {period.start.isoformat()} to {period.end.isoformat()}."
            ),
        )

    def finalize(
        self,
        summaries: Sequence[EmployeePeriodSummary],
        *,
        policy: FailurePolicy = FailurePolicy.ABORT,
    ) -> FinalizeResult:
        """Persist and announce one settlement per billable summary, in order.

        Committed settlements are never rolled back. Under ABORT the first
        failure stops the run and later employees are not attempted.
        """
        result = FinalizeResult()

        for summary in summaries:
            if not summary.is_billable:
                result.skipped.append(summary.employee_id)
                continue

            outcome = self._finalize_one(summary)
            result.add(outcome)
            if outcome.kind == OutcomeKind.FAILED and policy == FailurePolicy.ABORT:
                logger.error(
                    "Finalize aborted at employee %s after %d settlement(s)",
                    summary.employee_id,
                    result.succeeded_count,
                )
                break

        logger.info(
            "Finalized %d settlement(s): %d already settled, %d failed, %d skipped",
            result.succeeded_count,
            len(result.already_settled),
            len(result.failures),
            len(result.skipped),
        )
        return result

    def _finalize_one(self, summary: EmployeePeriodSummary) -> EmployeeOutcome:
        employee_id = summary.employee_id
        record = self.build_record(summary)

        try:
            stored = self._settlements.create(record)
        except DuplicateSettlementError:
            try:
                stored = self._settlements.get_by_key(record.settlement_key)
            except Exception as exc:
                logger.exception("Failed to load existing settlement %s", record.settlement_key)
                return EmployeeOutcome.failed(employee_id, str(exc), "persist")
            if stored is None or stored.is_notified:
                logger.info("Settlement %s already exists, not notifying again", record.settlement_key)
                return EmployeeOutcome.already_settled(employee_id)
            logger.info("Settlement %s exists but was never announced, retrying notification", record.settlement_key)
        except Exception as exc:
            logger.exception("Failed to persist settlement for employee %s", employee_id)
            return EmployeeOutcome.failed(employee_id, str(exc), "persist")

        try:
            self._notifier.send(
                employee_id,
                build_notification_message(summary, currency_symbol=self._currency_symbol),
            )
        except Exception as exc:
            logger.exception("Settlement %s stored but notification failed", record.settlement_key)
            return EmployeeOutcome.failed(employee_id, str(exc), "notify")

        try:
            self._settlements.mark_notified(record.settlement_key)
        except Exception as exc:
            # A later finalize would announce this settlement a second time.
            logger.exception("Settlement %s announced but not marked as notified", record.settlement_key)
            return EmployeeOutcome.failed(employee_id, str(exc), "mark_notified")

        return EmployeeOutcome.settled(stored)
