from __future__ import annotations

from typing import Sequence

from ..core.enums import BillingModel
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_decimal
from .model import Project
from .repository import ProjectRepository


class MySQLProjectRepository(ProjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_projects(self) -> Sequence[Project]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT project_id, name, billing_type, rate_per_hour,
                       count_metric_label, count_divisor, count_multiplier
                FROM projects
                ORDER BY name ASC
                """
            )
            rows = fetchall(cur)
            return [
                Project(
                    project_id=str(r["project_id"]),
                    name=r["name"],
                    billing_model=BillingModel(r["billing_type"]),
                    rate_per_hour=to_decimal(r.get("rate_per_hour")),
                    metric_label=r.get("count_metric_label"),
                    divisor=to_decimal(r.get("count_divisor")),
                    multiplier=to_decimal(r.get("count_multiplier")),
                )
                for r in rows
            ]
