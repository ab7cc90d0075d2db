"""Trade journal: records, stores, form drafts and actions."""

from fxjournal.journal.models import ActionResult, Trade
from fxjournal.journal.store import StoreError, TradeStore
from fxjournal.journal.draft import ComputedValue, TradeDraft
from fxjournal.journal.memory_store import InMemoryTradeStore
from fxjournal.journal.service import JournalService
from fxjournal.journal.sqlite_store import SqliteTradeStore

__all__ = [
    "ActionResult",
    "ComputedValue",
    "InMemoryTradeStore",
    "JournalService",
    "SqliteTradeStore",
    "StoreError",
    "Trade",
    "TradeDraft",
    "TradeStore",
]
