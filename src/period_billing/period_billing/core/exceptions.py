from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class FormulaError(DomainError):
    """Raised when a project's billing configuration cannot be evaluated."""

    def __init__(self, message: str, *, project_id: Optional[str] = None):
        super().__init__(message)
        self.project_id = project_id


class RetrievalError(DomainError):
    """Raised when one of an employee's period data sources cannot be read."""

    def __init__(self, message: str, *, employee_id: str, source: str):
        super().__init__(message)
        self.employee_id = employee_id
        self.source = source


class DuplicateSettlementError(DomainError):
    """Raised by a settlement store when the settlement key is already taken."""

    def __init__(self, settlement_key: str):
        super().__init__(f"Settlement already exists: {settlement_key}")
        self.settlement_key = settlement_key
