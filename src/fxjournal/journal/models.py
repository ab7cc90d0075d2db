"""Journal records and action results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from fxjournal.pnl.models import Direction


@dataclass(frozen=True)
class Trade:
    """A logged trade.

    ``pnl`` is derived from the other fields when the trade is drafted, but it
    is stored as its own value and may have been overridden by hand.
    """

    user_id: str
    pair: str
    direction: Direction
    size: float
    entry: float
    exit: float
    pnl: float
    date: date
    stop_loss: Optional[float] = None
    comments: Optional[str] = None
    id: Optional[str] = None

    def to_record(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "pair": self.pair,
            "type": self.direction.value,
            "size": self.size,
            "entry": self.entry,
            "exit": self.exit,
            "stop_loss": self.stop_loss,
            "pnl": self.pnl,
            "date": self.date.isoformat(),
            "comments": self.comments,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Trade":
        stop_loss = record.get("stop_loss")
        return cls(
            id=str(record["id"]) if record.get("id") is not None else None,
            user_id=str(record["user_id"]),
            pair=str(record["pair"]),
            direction=Direction(record["type"]),
            size=float(record["size"]),
            entry=float(record["entry"]),
            exit=float(record["exit"]),
            stop_loss=float(stop_loss) if stop_loss is not None else None,
            pnl=float(record["pnl"]),
            date=date.fromisoformat(str(record["date"])),
            comments=record.get("comments"),
        )


@dataclass(frozen=True)
class ActionResult:
    ok: bool
    message: str
    trades: list[Trade] = field(default_factory=list)
