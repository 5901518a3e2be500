from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .billing.aggregator import PeriodAggregator
from .billing.service import BillingSettlementService
from .billing.summary_builder import SummaryBuilder
from .core.constants import DEFAULT_CURRENCY_SYMBOL, DEFAULT_FETCH_WORKERS
from .core.enums import BillingModel, FailurePolicy
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .leave.mysql_leave_repository import MySQLLeaveRepository
from .notifications.mysql_message_notifier import MySQLMessageNotifier
from .projects.mysql_project_repository import MySQLProjectRepository
from .settlements.mysql_settlement_repository import MySQLSettlementRepository
from .settlements.service import SettlementFinalizer
from .worklogs.mysql_worklog_repository import MySQLWorkLogRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    projects_repo: MySQLProjectRepository
    employees_repo: MySQLEmployeeRepository
    worklogs_repo: MySQLWorkLogRepository
    attendance_repo: MySQLAttendanceRepository
    leave_repo: MySQLLeaveRepository
    settlements_repo: MySQLSettlementRepository
    notifier: MySQLMessageNotifier

    aggregator: PeriodAggregator
    summary_builder: SummaryBuilder
    finalizer: SettlementFinalizer
    billing_service: BillingSettlementService


def build_container(*, db_config: dict, settings: Optional[Any] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    fetch_workers = int(getattr(settings, "SETTLEMENT_FETCH_WORKERS", DEFAULT_FETCH_WORKERS))
    failure_policy = FailurePolicy(getattr(settings, "SETTLEMENT_FAILURE_POLICY", FailurePolicy.ABORT.value))
    billing_models = [
        BillingModel(str(m).strip())
        for m in getattr(settings, "SETTLEMENT_BILLING_MODELS", [m.value for m in BillingModel])
    ]
    currency_symbol = str(getattr(settings, "SETTLEMENT_CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL))

    projects_repo = MySQLProjectRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)
    worklogs_repo = MySQLWorkLogRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    leave_repo = MySQLLeaveRepository(conn)
    settlements_repo = MySQLSettlementRepository(conn)
    notifier = MySQLMessageNotifier(conn)

    aggregator = PeriodAggregator(worklogs_repo, attendance_repo, leave_repo, max_workers=fetch_workers)
    summary_builder = SummaryBuilder(employees_repo, projects_repo, aggregator, billing_models=billing_models)
    finalizer = SettlementFinalizer(settlements_repo, notifier, currency_symbol=currency_symbol)
    billing_service = BillingSettlementService(summary_builder, finalizer, failure_policy=failure_policy)

    return Container(
        conn=conn,
        projects_repo=projects_repo,
        employees_repo=employees_repo,
        worklogs_repo=worklogs_repo,
        attendance_repo=attendance_repo,
        leave_repo=leave_repo,
        settlements_repo=settlements_repo,
        notifier=notifier,
        aggregator=aggregator,
        summary_builder=summary_builder,
        finalizer=finalizer,
        billing_service=billing_service,
    )
