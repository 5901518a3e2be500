from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from period_billing.core.enums import FailurePolicy
from period_billing.core.exceptions import RetrievalError, ValidationError


def _february(world):
    world.add_employee("e1", "Alice Nguyen")
    world.add_employee("e2", "Binh Tran")
    world.add_unit_project("forms", divisor=1, multiplier="0.5")
    world.log("e1", "forms", date(2024, 2, 5), units=120)
    world.log("e1", "forms", date(2024, 2, 12), units=80)
    for day in range(1, 19):
        world.clock_in("e1", date(2024, 2, day))
    world.add_leave("e1", date(2024, 2, 26), date(2024, 2, 27))
    world.add_leave("e2", date(2024, 2, 20), date(2024, 2, 21))


def test_compute_then_finalize(world, feb_2024):
    _february(world)
    service = world.service()

    summaries = service.compute_summaries(*feb_2024)

    assert [s.employee_id for s in summaries] == ["e1", "e2"]
    assert summaries[0].grand_total == Decimal("100.00")
    assert summaries[1].grand_total == Decimal("0.00")
    assert summaries[1].attendance.days_on_leave == 2

    result = service.finalize(summaries)

    assert result.succeeded_count == 1
    assert result.skipped == ["e2"]
    assert [r for r, _ in world.notifier.sent] == ["e1"]


def test_compute_is_repeatable(world, feb_2024):
    _february(world)
    service = world.service()

    assert service.compute_summaries(*feb_2024) == service.compute_summaries(*feb_2024)
    assert world.settlements.by_key == {}


def test_iso_strings_are_accepted(world):
    _february(world)
    summaries = world.service().compute_summaries("2024-02-01", "2024-02-29T00:00:00Z")
    assert summaries[0].period.end == date(2024, 2, 29)


@pytest.mark.parametrize("start,end", [(None, date(2024, 2, 29)), (date(2024, 2, 1), None)])
def test_missing_dates_rejected(world, start, end):
    with pytest.raises(ValidationError):
        world.service().compute_summaries(start, end)


def test_inverted_period_rejected(world):
    with pytest.raises(ValidationError):
        world.service().compute_summaries(date(2024, 3, 1), date(2024, 2, 1))


def test_finalize_requires_something_billable(world, feb_2024):
    world.add_employee("e2")
    world.add_leave("e2", date(2024, 2, 20), date(2024, 2, 21))
    service = world.service()

    with pytest.raises(ValidationError):
        service.finalize(service.compute_summaries(*feb_2024))
    with pytest.raises(ValidationError):
        service.finalize([])


def test_compute_summaries_ignores_isolate_default(world, feb_2024):
    _february(world)
    world.work_logs.fail_for.add("e2")
    service = world.service(failure_policy=FailurePolicy.ISOLATE)

    with pytest.raises(RetrievalError):
        service.compute_summaries(*feb_2024)

    batch = service.compute_summary_batch(*feb_2024)
    assert [s.employee_id for s in batch.summaries] == ["e1"]
    assert batch.failures[0].employee_id == "e2"
