from datetime import date
from pathlib import Path

from fxjournal.identity import StaticIdentityProvider, User
from fxjournal.journal import JournalService, SqliteTradeStore, TradeDraft
from fxjournal.monitoring import AuditLog, LogNotifier, Monitor
from fxjournal.pnl import Direction
from fxjournal.sizing import SizingInput, compute_sizing


sizing = compute_sizing(
    SizingInput(balance=10000, risk_percent=1, stop_loss_pips=50, pair="EUR/USD", reward_ratio=2)
)
print("Sizing:", sizing)

audit = AuditLog(Path("runtime") / "audit.log")
store = SqliteTradeStore(Path("runtime") / "journal.db")
identity = StaticIdentityProvider(User(id="demo-user", email="demo@example.com"))
service = JournalService(store, identity, monitor=Monitor(LogNotifier()), audit_log=audit)

draft = TradeDraft(date=date(2024, 6, 1)).with_changes(
    pair="USD/JPY",
    direction=Direction.SELL,
    size=1.0,
    entry=150.00,
    exit=149.50,
)
print("Auto P&L:", draft.pnl.value)

outcome = service.add_trade(draft)
print("Add:", outcome.message, [trade.pnl for trade in outcome.trades])

refused = service.add_trade(TradeDraft(pair="WTI"))
print("WTI for a regular account:", refused.message)
