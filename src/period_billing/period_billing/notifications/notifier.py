from __future__ import annotations

from typing import Protocol


class Notifier(Protocol):
    def send(self, recipient_id: str, message: str) -> None:
        """Deliver ``message`` to ``recipient_id``; raise on failure."""

        raise NotImplementedError
