from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_decimal
from .model import WorkLogEntry
from .repository import WorkLogRepository


class MySQLWorkLogRepository(WorkLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date) -> Sequence[WorkLogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT r.user_id, r.work_date, i.project_id, i.hours_worked, i.achieved_count
                FROM daily_work_reports r
                JOIN project_log_items i ON i.report_id = r.report_id
                WHERE r.user_id=%s AND r.work_date BETWEEN %s AND %s
                ORDER BY r.work_date ASC, i.item_id ASC
                """,
                (str(employee_id), start_date, end_date),
            )
            rows = fetchall(cur)
            return [
                WorkLogEntry(
                    employee_id=str(r["user_id"]),
                    project_id=str(r["project_id"]),
                    work_date=r["work_date"],
                    hours_worked=to_decimal(r.get("hours_worked")),
                    achieved_count=to_decimal(r.get("achieved_count")),
                )
                for r in rows
            ]
