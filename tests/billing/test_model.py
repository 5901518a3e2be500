from __future__ import annotations

from decimal import Decimal

import pytest

from period_billing.billing.model import EmployeePeriodSummary, parse_amount
from period_billing.core.exceptions import ValidationError


def _payload(amount="100.00", total="100.00"):
    return {
        "employee_id": "e1",
        "employee_name": "Alice Nguyen",
        "start_date": "2024-02-01",
        "end_date": "2024-02-29",
        "details": [
            {
                "project_id": "forms",
                "project_name": "Forms",
                "billing_model": "count_based",
                "quantity": "200",
                "metric_label": "Records",
                "formula_applied": "(Achieved / 1) * 0.5",
                "amount": amount,
            }
        ],
        "attendance": {"days_present": 18, "days_on_leave": 2},
        "grand_total": total,
    }


def test_summary_from_dict_accepts_consistent_payload():
    summary = EmployeePeriodSummary.from_dict(_payload())
    assert summary.grand_total == Decimal("100.00")
    assert summary.details[0].amount == Decimal("100.00")


def test_summary_from_dict_rejects_total_mismatch():
    with pytest.raises(ValidationError):
        EmployeePeriodSummary.from_dict(_payload(total="99999.99"))


@pytest.mark.parametrize("value", ["1.005", "-1.00", "NaN", "Infinity"])
def test_parse_amount_rejects(value):
    with pytest.raises(ValidationError):
        parse_amount(value, "amount")


def test_parse_amount_accepts_whole_units():
    assert parse_amount("100", "amount") == Decimal("100.00")
