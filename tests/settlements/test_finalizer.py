from __future__ import annotations

from datetime import date
from decimal import Decimal

from period_billing.billing.model import AttendanceSummary, EmployeePeriodSummary, Period, ProjectEarning
from period_billing.core.enums import BillingModel, FailurePolicy, SettlementStatus
from period_billing.settlements.model import settlement_key

FEB = Period(start=date(2024, 2, 1), end=date(2024, 2, 29))


def _summary(employee_id: str, amount: str = "100.00", *, details: bool = True) -> EmployeePeriodSummary:
    earnings = ()
    if details:
        earnings = (
            ProjectEarning(
                project_id="forms",
                project_name="Forms",
                billing_model=BillingModel.UNIT_BASED,
                quantity=Decimal("200"),
                metric_label="Records",
                formula_applied="(Achieved / 1) * 0.5",
                amount=Decimal(amount),
            ),
        )
    return EmployeePeriodSummary(
        employee_id=employee_id,
        employee_name=f"Employee {employee_id}",
        period=FEB,
        details=earnings,
        attendance=AttendanceSummary(days_present=18, days_on_leave=2),
        grand_total=Decimal(amount) if details else Decimal("0.00"),
    )


def test_persists_and_notifies_each_employee(world):
    result = world.finalizer().finalize([_summary("e1"), _summary("e2", "42.50")])

    assert result.succeeded_count == 2
    assert result.failed_at_employee_id is None
    record = world.settlements.for_employee("e1")[0]
    assert record.status == SettlementStatus.PENDING
    assert record.total_amount == Decimal("100.00")
    assert record.period == FEB
    assert record.primary_project_id == "forms"
    assert record.attendance.days_present == 18
    assert record.settlement_key == settlement_key("e1", FEB.start, FEB.end)

    recipient, message = world.notifier.sent[0]
    assert recipient == "e1"
    assert "Grand Total: $100.00" in message
    assert "18 days present, 2 days on leave" in message


def test_leave_only_summaries_are_skipped(world):
    result = world.finalizer().finalize([_summary("e1", details=False), _summary("e2")])

    assert result.skipped == ["e1"]
    assert result.succeeded_count == 1
    assert world.settlements.for_employee("e1") == []


def test_sequential_abort_on_persist_failure(world):
    world.settlements.fail_for.add("e2")

    result = world.finalizer().finalize([_summary("e1"), _summary("e2"), _summary("e3")])

    assert result.succeeded_count == 1
    assert result.failed_at_employee_id == "e2"
    assert result.failures[0].stage == "persist"
    assert world.settlements.for_employee("e1")
    assert world.settlements.for_employee("e3") == []
    assert [r for r, _ in world.notifier.sent] == ["e1"]


def test_isolate_continues_after_failure(world):
    world.settlements.fail_for.add("e2")

    result = world.finalizer().finalize(
        [_summary("e1"), _summary("e2"), _summary("e3")], policy=FailurePolicy.ISOLATE
    )

    assert result.succeeded_count == 2
    assert [f.employee_id for f in result.failures] == ["e2"]
    assert world.settlements.for_employee("e3")


def test_notify_failure_keeps_committed_record(world):
    world.notifier.fail_for.add("e1")

    result = world.finalizer().finalize([_summary("e1"), _summary("e2")])

    assert result.succeeded_count == 0
    assert result.failures[0].stage == "notify"
    assert world.settlements.for_employee("e1")
    assert world.settlements.for_employee("e2") == []


def test_second_finalize_does_not_duplicate(world):
    finalizer = world.finalizer()
    finalizer.finalize([_summary("e1")])

    result = finalizer.finalize([_summary("e1")])

    assert result.succeeded_count == 0
    assert result.already_settled == ["e1"]
    assert len(world.settlements.for_employee("e1")) == 1
    assert len(world.notifier.sent) == 1


def test_record_without_details_falls_back_to_summary_project(world):
    record = world.finalizer().build_record(_summary("e1", details=False))
    assert record.details == ()
    assert record.primary_project_id == "SUMMARY_BILLING"


def test_marks_settlement_notified_after_send(world):
    world.finalizer().finalize([_summary("e1")])
    assert world.settlements.for_employee("e1")[0].is_notified


def test_refinalize_after_notify_failure_announces_once(world):
    finalizer = world.finalizer()
    world.notifier.fail_for.add("e1")

    first = finalizer.finalize([_summary("e1")])

    assert first.failures[0].stage == "notify"
    assert not world.settlements.for_employee("e1")[0].is_notified

    world.notifier.fail_for.clear()
    second = finalizer.finalize([_summary("e1")])
    third = finalizer.finalize([_summary("e1")])

    assert second.succeeded_count == 1
    assert second.already_settled == []
    assert third.already_settled == ["e1"]
    assert [r for r, _ in world.notifier.sent] == ["e1"]
    assert len(world.settlements.for_employee("e1")) == 1


def test_unrecorded_notification_is_reported(world):
    world.settlements.fail_mark_for.add("e1")

    result = world.finalizer().finalize([_summary("e1"), _summary("e2")])

    assert result.succeeded_count == 0
    assert result.failures[0].stage == "mark_notified"
    assert len(world.notifier.sent) == 1
