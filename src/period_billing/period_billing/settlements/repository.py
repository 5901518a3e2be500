from __future__ import annotations

from typing import Optional, Protocol

from .model import SettlementRecord


class SettlementRepository(Protocol):
    def create(self, record: SettlementRecord) -> SettlementRecord:
        """Persist ``record`` and return the stored copy.

        Must raise DuplicateSettlementError when ``record.settlement_key`` is
        already stored; the check has to be atomic with the insert.
        """

        raise NotImplementedError

    def get_by_key(self, settlement_key: str) -> Optional[SettlementRecord]:
        raise NotImplementedError

    def mark_notified(self, settlement_key: str) -> None:
        """Stamp the settlement once its employee has been told about it."""

        raise NotImplementedError
