from __future__ import annotations

from ..core.constants import SYSTEM_SENDER_ID
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .notifier import Notifier


class MySQLMessageNotifier(Notifier):
    """Delivers notifications as internal inbox messages from the system sender."""

    def __init__(self, conn_factory: DatabaseConnection, *, sender_id: str = SYSTEM_SENDER_ID):
        self._conn_factory = conn_factory
        self._sender_id = sender_id

    def send(self, recipient_id: str, message: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO internal_messages(sender_id, recipient_id, content)
                VALUES(%s,%s,%s)
                """,
                (self._sender_id, str(recipient_id), message),
            )
