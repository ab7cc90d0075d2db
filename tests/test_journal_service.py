from __future__ import annotations

from datetime import date

from fxjournal.identity import StaticIdentityProvider, User
from fxjournal.journal import InMemoryTradeStore, JournalService, StoreError, TradeDraft
from fxjournal.monitoring import AuditLog, MemoryNotifier, Monitor
from fxjournal.pnl import Direction

OWNER = "owner@example.com"


class FailingStore(InMemoryTradeStore):
    def insert(self, trade):
        raise StoreError("backend unavailable")

    def update(self, trade_id, trade):
        raise StoreError("backend unavailable")

    def delete(self, trade_id, user_id):
        raise StoreError("backend unavailable")


def _service(store=None, user=None, tmp_path=None):
    notifier = MemoryNotifier()
    audit = AuditLog(tmp_path / "audit.log") if tmp_path is not None else None
    service = JournalService(
        store or InMemoryTradeStore(),
        StaticIdentityProvider(user),
        monitor=Monitor(notifier),
        audit_log=audit,
        privileged_email=OWNER,
    )
    return service, notifier, audit


def _draft(**changes) -> TradeDraft:
    base = dict(pair="EUR/USD", direction=Direction.BUY, size=1.0, entry=1.1000, exit=1.1050)
    base.update(changes)
    return TradeDraft(date=date(2024, 6, 1)).with_changes(**base)


def test_add_trade_refetches_list(tmp_path):
    user = User(id="u-1", email="trader@example.com")
    service, notifier, audit = _service(user=user, tmp_path=tmp_path)

    first = service.add_trade(_draft())
    second = service.add_trade(_draft(pair="GBP/USD").with_changes(date=date(2024, 6, 2)))

    assert first.ok and second.ok
    assert [trade.pair for trade in second.trades] == ["GBP/USD", "EUR/USD"]
    assert second.trades[1].pnl == 500.00
    assert service.list_trades() == second.trades
    assert notifier.drain() == []
    assert [event["event"] for event in audit.read()] == ["trade_inserted", "trade_inserted"]


def test_signed_out_is_refused_without_write():
    store = InMemoryTradeStore()
    service, notifier, _ = _service(store=store)

    outcome = service.add_trade(_draft())
    assert outcome.ok is False
    assert "signed in" in outcome.message
    assert notifier.drain()[0][0] == "VALIDATION"
    assert service.list_trades() == []


def test_blank_pair_and_missing_date_are_refused():
    user = User(id="u-1", email="trader@example.com")
    store = InMemoryTradeStore()
    service, _, _ = _service(store=store, user=user)

    assert service.add_trade(_draft(pair=" ")).ok is False
    assert service.add_trade(_draft().with_changes(date=None)).ok is False
    assert store.list_by_owner("u-1") == []


def test_wti_requires_privileged_account():
    regular, _, _ = _service(user=User(id="u-1", email="trader@example.com"))
    owner, _, _ = _service(user=User(id="u-2", email=OWNER))
    draft = _draft(pair="WTI", entry=80.0, exit=81.0)

    refused = regular.add_trade(draft)
    assert refused.ok is False
    assert "WTI" in refused.message

    accepted = owner.add_trade(draft)
    assert accepted.ok is True
    assert accepted.trades[0].pnl == 1000.00


def test_store_failure_is_notified_and_not_retried(tmp_path):
    user = User(id="u-1", email="trader@example.com")
    service, notifier, audit = _service(store=FailingStore(), user=user, tmp_path=tmp_path)

    outcome = service.add_trade(_draft())
    assert outcome.ok is False
    assert outcome.message == "Failed to add trade."
    events = notifier.drain()
    assert len(events) == 1
    assert events[0][0] == "STORE_FAILURE"
    assert "backend unavailable" in events[0][1]
    assert audit.read()[0]["event"] == "store_failure"


def test_update_trade_replaces_values():
    user = User(id="u-1", email="trader@example.com")
    service, _, _ = _service(user=user)
    added = service.add_trade(_draft())
    trade = added.trades[0]

    draft = service.draft_for(trade).with_changes(exit=1.1100, comments="trailed stop")
    updated = service.update_trade(trade.id, draft)

    assert updated.ok is True
    assert updated.trades[0].pnl == 1000.00
    assert updated.trades[0].comments == "trailed stop"


def test_update_keeps_manual_pnl():
    user = User(id="u-1", email="trader@example.com")
    service, _, _ = _service(user=user)
    trade = service.add_trade(_draft().with_changes(pnl=450.0)).trades[0]
    assert trade.pnl == 450.0

    reopened = service.draft_for(trade)
    assert reopened.pnl.overridden is True
    updated = service.update_trade(trade.id, reopened.with_changes(comments="fees"))
    assert updated.trades[0].pnl == 450.0


def test_delete_trade_refetches():
    user = User(id="u-1", email="trader@example.com")
    service, _, _ = _service(user=user)
    trade = service.add_trade(_draft()).trades[0]

    outcome = service.delete_trade(trade.id)
    assert outcome.ok is True
    assert outcome.trades == []


def test_delete_of_foreign_trade_fails():
    store = InMemoryTradeStore()
    alice, _, _ = _service(store=store, user=User(id="alice", email="alice@example.com"))
    bob, notifier, _ = _service(store=store, user=User(id="bob", email="bob@example.com"))
    trade = alice.add_trade(_draft()).trades[0]

    outcome = bob.delete_trade(trade.id)
    assert outcome.ok is False
    assert notifier.drain()[0][0] == "STORE_FAILURE"
    assert len(alice.list_trades()) == 1


class UnreadableStore(InMemoryTradeStore):
    def list_by_owner(self, user_id):
        raise StoreError("read timeout")


def test_list_failure_reports_and_returns_empty():
    user = User(id="u-1", email="trader@example.com")
    service, notifier, _ = _service(store=UnreadableStore(), user=user)

    assert service.list_trades() == []
    event, message = notifier.drain()[0]
    assert event == "STORE_FAILURE"
    assert message == "Failed to load trades: read timeout"


class ReloadFailsOnceStore(InMemoryTradeStore):
    def __init__(self):
        super().__init__()
        self.reload_failures = 1

    def list_by_owner(self, user_id):
        if self.reload_failures:
            self.reload_failures -= 1
            raise StoreError("read timeout")
        return super().list_by_owner(user_id)


def test_saved_trade_is_not_reported_as_failed_when_reload_fails(tmp_path):
    user = User(id="u-1", email="trader@example.com")
    store = ReloadFailsOnceStore()
    service, notifier, audit = _service(store=store, user=user, tmp_path=tmp_path)

    outcome = service.add_trade(_draft())

    assert outcome.ok is True
    assert outcome.message.startswith("Trade saved.")
    assert outcome.trades == []
    event, message = notifier.drain()[0]
    assert event == "STORE_FAILURE"
    assert message == "Failed to reload trades: read timeout"
    assert [event["event"] for event in audit.read()] == ["trade_inserted", "store_failure"]
    assert len(service.list_trades()) == 1
