"""SQLite-backed trade store."""

from __future__ import annotations

import sqlite3
import threading
import uuid
from pathlib import Path

from fxjournal.journal.models import Trade
from fxjournal.journal.store import StoreError, TradeStore

_COLUMNS = "id, user_id, pair, type, size, entry, exit, stop_loss, pnl, date, comments"


class SqliteTradeStore(TradeStore):
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._local = threading.local()
        self._conn()

    def _conn(self) -> sqlite3.Connection:
        conn = getattr(self._local, "conn", None)
        if conn is None:
            conn = sqlite3.connect(self.path)
            conn.row_factory = sqlite3.Row
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS trades (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    pair TEXT NOT NULL,
                    type TEXT NOT NULL CHECK (type IN ('BUY', 'SELL')),
                    size REAL NOT NULL,
                    entry REAL NOT NULL,
                    exit REAL NOT NULL,
                    stop_loss REAL,
                    pnl REAL NOT NULL,
                    date TEXT NOT NULL,
                    comments TEXT
                )
                """
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_trades_user_date ON trades(user_id, date)")
            conn.commit()
            self._local.conn = conn
        return conn

    def insert(self, trade: Trade) -> str:
        trade_id = uuid.uuid4().hex
        record = trade.to_record()
        try:
            conn = self._conn()
            conn.execute(
                f"INSERT INTO trades ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    trade_id,
                    record["user_id"],
                    record["pair"],
                    record["type"],
                    record["size"],
                    record["entry"],
                    record["exit"],
                    record["stop_loss"],
                    record["pnl"],
                    record["date"],
                    record["comments"],
                ),
            )
            conn.commit()
        except sqlite3.Error as exc:
            raise StoreError(f"insert failed: {exc}") from exc
        return trade_id

    def update(self, trade_id: str, trade: Trade) -> None:
        record = trade.to_record()
        try:
            conn = self._conn()
            cursor = conn.execute(
                "UPDATE trades SET pair = ?, type = ?, size = ?, entry = ?, exit = ?, stop_loss = ?, "
                "pnl = ?, date = ?, comments = ? WHERE id = ? AND user_id = ?",
                (
                    record["pair"],
                    record["type"],
                    record["size"],
                    record["entry"],
                    record["exit"],
                    record["stop_loss"],
                    record["pnl"],
                    record["date"],
                    record["comments"],
                    trade_id,
                    record["user_id"],
                ),
            )
            conn.commit()
        except sqlite3.Error as exc:
            raise StoreError(f"update failed: {exc}") from exc
        if cursor.rowcount == 0:
            raise StoreError(f"trade {trade_id} not found")

    def delete(self, trade_id: str, user_id: str) -> None:
        try:
            conn = self._conn()
            cursor = conn.execute("DELETE FROM trades WHERE id = ? AND user_id = ?", (trade_id, user_id))
            conn.commit()
        except sqlite3.Error as exc:
            raise StoreError(f"delete failed: {exc}") from exc
        if cursor.rowcount == 0:
            raise StoreError(f"trade {trade_id} not found")

    def list_by_owner(self, user_id: str) -> list[Trade]:
        try:
            rows = self._conn().execute(
                f"SELECT {_COLUMNS} FROM trades WHERE user_id = ? ORDER BY date DESC, rowid DESC",
                (user_id,),
            ).fetchall()
        except sqlite3.Error as exc:
            raise StoreError(f"list failed: {exc}") from exc
        return [Trade.from_record(dict(row)) for row in rows]

    def close(self) -> None:
        conn = getattr(self._local, "conn", None)
        if conn is None:
            return
        conn.close()
        self._local.conn = None
