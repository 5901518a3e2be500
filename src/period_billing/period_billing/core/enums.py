from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles; only EMPLOYEE is eligible for period billing."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class BillingModel(str, Enum):
    """How a project turns work into money."""

    TIME_BASED = "hourly"
    UNIT_BASED = "count_based"


class RequestStatus(str, Enum):
    """Approval workflow status of a leave request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class SettlementStatus(str, Enum):
    """Lifecycle of a persisted settlement. Only PENDING is set by this engine."""

    PENDING = "PENDING"
    PAID = "PAID"
    OVERDUE = "OVERDUE"


class FailurePolicy(str, Enum):
    """What a batch does when one employee fails.

    ABORT stops the batch at the first failure. ISOLATE records the failure
    and moves on to the next employee.
    """

    ABORT = "abort"
    ISOLATE = "isolate"


class OutcomeKind(str, Enum):
    """What finalizing one employee's summary ended in."""

    SETTLED = "settled"
    ALREADY_SETTLED = "already_settled"
    FAILED = "failed"
