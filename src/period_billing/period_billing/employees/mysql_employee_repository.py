from __future__ import annotations

from typing import Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_eligible(self, *, role: Role = Role.EMPLOYEE) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, first_name, last_name, role, is_active
                FROM users
                WHERE role=%s AND is_active=1
                ORDER BY user_id ASC
                """,
                (role.value,),
            )
            rows = fetchall(cur)
            return [
                Employee(
                    employee_id=str(r["user_id"]),
                    full_name=f"{r['first_name']} {r.get('last_name') or ''}".strip(),
                    role=Role(r["role"]),
                    is_active=bool(r.get("is_active", True)),
                )
                for r in rows
            ]
