"""In-memory trade store for local testing."""

from __future__ import annotations

from dataclasses import replace

from fxjournal.journal.models import Trade
from fxjournal.journal.store import StoreError, TradeStore


class InMemoryTradeStore(TradeStore):
    def __init__(self) -> None:
        self._trades: dict[str, Trade] = {}
        self._counter = 0

    def insert(self, trade: Trade) -> str:
        self._counter += 1
        trade_id = f"mem-{self._counter}"
        self._trades[trade_id] = replace(trade, id=trade_id)
        return trade_id

    def update(self, trade_id: str, trade: Trade) -> None:
        existing = self._trades.get(trade_id)
        if existing is None or existing.user_id != trade.user_id:
            raise StoreError(f"trade {trade_id} not found")
        self._trades[trade_id] = replace(trade, id=trade_id)

    def delete(self, trade_id: str, user_id: str) -> None:
        existing = self._trades.get(trade_id)
        if existing is None or existing.user_id != user_id:
            raise StoreError(f"trade {trade_id} not found")
        del self._trades[trade_id]

    def list_by_owner(self, user_id: str) -> list[Trade]:
        owned = [trade for trade in reversed(list(self._trades.values())) if trade.user_id == user_id]
        return sorted(owned, key=lambda trade: trade.date, reverse=True)
