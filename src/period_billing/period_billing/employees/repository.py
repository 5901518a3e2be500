from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import Role
from .model import Employee


class EmployeeRepository(Protocol):
    """Read-only employee directory.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def list_eligible(self, *, role: Role = Role.EMPLOYEE) -> Sequence[Employee]:
        """Active employees holding ``role``."""

        raise NotImplementedError
