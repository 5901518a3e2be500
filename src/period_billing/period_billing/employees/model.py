from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee identity as seen by billing."""

    employee_id: str
    full_name: str
    role: Role = Role.EMPLOYEE
    is_active: bool = True
