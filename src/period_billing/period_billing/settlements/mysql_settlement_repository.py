from __future__ import annotations

import json
from dataclasses import replace
from typing import Optional

from ..billing.model import AttendanceSummary, Period, ProjectEarning
from ..core.enums import SettlementStatus
from ..core.exceptions import DuplicateSettlementError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_key, load_json, to_decimal
from .model import SettlementRecord
from .repository import SettlementRepository


class MySQLSettlementRepository(SettlementRepository):
    """Settlements keyed by ``settlement_key`` (UNIQUE in billing_settlements)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, record: SettlementRecord) -> SettlementRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO billing_settlements(
                        settlement_key, user_id, period_start, period_end, total_amount,
                        status, details, days_present, days_on_leave, notes
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        record.settlement_key,
                        record.employee_id,
                        record.period.start,
                        record.period.end,
                        record.total_amount,
                        record.status.value,
                        json.dumps([d.to_dict() for d in record.details]),
                        int(record.attendance.days_present),
                        int(record.attendance.days_on_leave),
                        record.notes,
                    ),
                )
                settlement_id = int(cur.lastrowid)
        except Exception as exc:
            if is_duplicate_key(exc):
                raise DuplicateSettlementError(record.settlement_key) from exc
            raise
        return replace(record, settlement_id=settlement_id)

    def get_by_key(self, settlement_key: str) -> Optional[SettlementRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT settlement_id, settlement_key, user_id, period_start, period_end, total_amount,
                       status, details, days_present, days_on_leave, notes, created_at, notified_at
                FROM billing_settlements
                WHERE settlement_key=%s
                """,
                (settlement_key,),
            )
            row = fetchone(cur)

        if row is None:
            return None
        return SettlementRecord(
            settlement_id=int(row["settlement_id"]),
            settlement_key=str(row["settlement_key"]),
            employee_id=str(row["user_id"]),
            period=Period(start=row["period_start"], end=row["period_end"]),
            details=tuple(ProjectEarning.from_dict(d) for d in load_json(row["details"]) or []),
            attendance=AttendanceSummary(
                days_present=int(row["days_present"] or 0),
                days_on_leave=int(row["days_on_leave"] or 0),
            ),
            total_amount=to_decimal(row["total_amount"]),
            status=SettlementStatus(row["status"]),
            notes=row["notes"],
            created_at=row["created_at"],
            notified_at=row["notified_at"],
        )

    def mark_notified(self, settlement_key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE billing_settlements SET notified_at=NOW() WHERE settlement_key=%s AND notified_at IS NULL",
                (settlement_key,),
            )
