"""Journal actions for the signed-in user."""

from __future__ import annotations

from typing import Optional

from fxjournal.identity import IdentityProvider, User
from fxjournal.instruments import PRIVILEGED_EMAIL, Instrument, instrument_set
from fxjournal.journal.draft import TradeDraft
from fxjournal.journal.models import ActionResult, Trade
from fxjournal.journal.store import StoreError, TradeStore


class JournalService:
    """Validates and writes trades, then re-reads the owner's list from the store.

    The store is the only source of truth, so every successful write is
    followed by a fresh ``list_by_owner``. Store failures are reported once
    and never retried. A write that succeeded is reported as such even when
    the reload after it fails.
    """

    def __init__(
        self,
        store: TradeStore,
        identity: IdentityProvider,
        monitor: Optional[object] = None,
        audit_log: Optional[object] = None,
        privileged_email: str = PRIVILEGED_EMAIL,
        instrument_overrides: Optional[dict[str, dict]] = None,
    ) -> None:
        self.store = store
        self.identity = identity
        self._monitor = monitor
        self._audit_log = audit_log
        self.privileged_email = privileged_email
        self.instrument_overrides = instrument_overrides or {}

    def _log(self, event: str, payload: dict) -> None:
        if self._audit_log is None:
            return
        self._audit_log.log(event, payload)

    def _refuse(self, message: str) -> ActionResult:
        if self._monitor is not None:
            self._monitor.validation_failed(message)
        self._log("validation_failed", {"message": message})
        return ActionResult(False, message)

    def _store_failed(self, action: str, exc: StoreError) -> ActionResult:
        if self._monitor is not None:
            self._monitor.store_failure(action, str(exc))
        self._log("store_failure", {"action": action, "error": str(exc)})
        return ActionResult(False, f"Failed to {action}.")

    def _saved(self, user: User, message: str) -> ActionResult:
        try:
            trades = self.store.list_by_owner(user.id)
        except StoreError as exc:
            self._store_failed("reload trades", exc)
            return ActionResult(True, f"{message} The trade list could not be reloaded.")
        return ActionResult(True, message, trades)

    def current_user(self) -> Optional[User]:
        return self.identity.get_current_user()

    def available_instruments(self) -> tuple[Instrument, ...]:
        return instrument_set(self.current_user(), self.privileged_email, self.instrument_overrides)

    def instrument_for(self, symbol: str) -> Optional[Instrument]:
        for instrument in self.available_instruments():
            if instrument.symbol == symbol:
                return instrument
        return None

    def list_trades(self) -> list[Trade]:
        user = self.current_user()
        if user is None:
            return []
        try:
            return self.store.list_by_owner(user.id)
        except StoreError as exc:
            self._store_failed("load trades", exc)
            return []

    def _validate(self, user: Optional[User], draft: TradeDraft) -> Optional[str]:
        if user is None:
            return "You must be signed in to manage trades."
        if not draft.pair or not draft.pair.strip():
            return "Pair is required."
        if draft.date is None:
            return "Date is required."
        if self.instrument_for(draft.pair) is None:
            return f"{draft.pair} is not available for this account."
        return None

    def add_trade(self, draft: TradeDraft) -> ActionResult:
        user = self.current_user()
        problem = self._validate(user, draft)
        if problem:
            return self._refuse(problem)

        trade = draft.to_trade(user.id)
        try:
            trade_id = self.store.insert(trade)
        except StoreError as exc:
            return self._store_failed("add trade", exc)
        self._log("trade_inserted", {"trade_id": trade_id, "user_id": user.id, "pair": trade.pair, "pnl": trade.pnl})
        return self._saved(user, "Trade saved.")

    def update_trade(self, trade_id: str, draft: TradeDraft) -> ActionResult:
        user = self.current_user()
        problem = self._validate(user, draft)
        if problem:
            return self._refuse(problem)

        trade = draft.to_trade(user.id, trade_id=trade_id)
        try:
            self.store.update(trade_id, trade)
        except StoreError as exc:
            return self._store_failed("update trade", exc)
        self._log("trade_updated", {"trade_id": trade_id, "user_id": user.id, "pnl": trade.pnl})
        return self._saved(user, "Trade updated.")

    def delete_trade(self, trade_id: str) -> ActionResult:
        user = self.current_user()
        if user is None:
            return self._refuse("You must be signed in to manage trades.")
        try:
            self.store.delete(trade_id, user.id)
        except StoreError as exc:
            return self._store_failed("delete trade", exc)
        self._log("trade_deleted", {"trade_id": trade_id, "user_id": user.id})
        return self._saved(user, "Trade deleted.")

    def draft_for(self, trade: Trade) -> TradeDraft:
        return TradeDraft.from_trade(trade, self.instrument_for(trade.pair))
