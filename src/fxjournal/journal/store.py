"""Record store interface for trades."""

from __future__ import annotations

from fxjournal.journal.models import Trade


class StoreError(RuntimeError):
    """Raised when the backing store rejects or fails an operation."""


class TradeStore:
    def insert(self, trade: Trade) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def update(self, trade_id: str, trade: Trade) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def delete(self, trade_id: str, user_id: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def list_by_owner(self, user_id: str) -> list[Trade]:  # pragma: no cover - interface
        """Trades for one owner, newest date first."""
        raise NotImplementedError

    def close(self) -> None:
        return None
