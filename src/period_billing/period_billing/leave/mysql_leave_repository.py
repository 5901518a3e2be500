from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import LeaveRequest
from .repository import LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(
        self,
        employee_id: str,
        *,
        status: RequestStatus,
        start_date: date,
        end_date: date,
    ) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT request_id, user_id, start_date, end_date, status
                FROM leave_requests
                WHERE user_id=%s AND status=%s AND start_date <= %s AND end_date >= %s
                ORDER BY start_date ASC
                """,
                (str(employee_id), status.value, end_date, start_date),
            )
            rows = fetchall(cur)
            return [
                LeaveRequest(
                    request_id=int(r["request_id"]),
                    employee_id=str(r["user_id"]),
                    start_date=r["start_date"],
                    end_date=r["end_date"],
                    status=RequestStatus(r["status"]),
                )
                for r in rows
            ]
