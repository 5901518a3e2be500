from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, work_date, clock_in_time, clock_out_time
                FROM attendance_records
                WHERE user_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC
                """,
                (str(employee_id), start_date, end_date),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    employee_id=str(r["user_id"]),
                    work_date=r["work_date"],
                    clock_in=r.get("clock_in_time"),
                    clock_out=r.get("clock_out_time"),
                )
                for r in rows
            ]
