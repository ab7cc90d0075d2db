"""Editable trade form with auto-computed, overridable P&L."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Optional

from fxjournal.instruments import Instrument, resolve_instrument
from fxjournal.journal.models import Trade
from fxjournal.pnl import Direction, compute_pnl

PNL_INPUTS = frozenset({"pair", "direction", "size", "entry", "exit"})
_UNSET = object()


@dataclass(frozen=True)
class ComputedValue:
    """Last computed value plus an optional manual override.

    ``overridden`` means the user edited the value after the last computation.
    """

    computed: Optional[float] = None
    override: Optional[float] = None
    overridden: bool = False

    @property
    def value(self) -> Optional[float]:
        if self.overridden:
            return self.override
        return self.computed

    def recompute(self, value: Optional[float]) -> "ComputedValue":
        if value is None:
            return self
        return ComputedValue(computed=value)

    def set_manual(self, value: Optional[float]) -> "ComputedValue":
        return replace(self, override=value, overridden=True)


@dataclass(frozen=True)
class TradeDraft:
    pair: str = "EUR/USD"
    direction: Direction = Direction.BUY
    size: Optional[float] = None
    entry: Optional[float] = None
    exit: Optional[float] = None
    stop_loss: Optional[float] = None
    date: Optional[date] = field(default_factory=date.today)
    comments: Optional[str] = None
    pnl: ComputedValue = field(default_factory=ComputedValue)

    def auto_pnl(self, instrument: Optional[Instrument] = None) -> Optional[float]:
        if instrument is None:
            instrument = resolve_instrument(self.pair)
        return compute_pnl(self.direction, self.size, self.entry, self.exit, instrument)

    def with_changes(self, instrument: Optional[Instrument] = None, **changes: Any) -> "TradeDraft":
        """Apply field edits the way the form does.

        Setting ``pnl`` marks it as a manual override. Changing any P&L input
        recomputes it, and a defined result replaces any earlier override.
        """
        manual_pnl = changes.pop("pnl", _UNSET)
        if "direction" in changes:
            changes["direction"] = Direction(changes["direction"])
        draft = replace(self, **changes)
        if PNL_INPUTS.intersection(changes):
            draft = replace(draft, pnl=draft.pnl.recompute(draft.auto_pnl(instrument)))
        if manual_pnl is not _UNSET:
            draft = replace(draft, pnl=draft.pnl.set_manual(manual_pnl))
        return draft

    def with_pnl_field(self, typed: Optional[float], shown: Optional[float], override: bool = False) -> "TradeDraft":
        """Keep a P&L typed into the form.

        The value counts as an override when the box is ticked or when it no
        longer matches what the form displayed.
        """
        if override or typed != shown:
            return self.with_changes(pnl=typed)
        return self

    @classmethod
    def from_trade(cls, trade: Trade, instrument: Optional[Instrument] = None) -> "TradeDraft":
        draft = cls(
            pair=trade.pair,
            direction=trade.direction,
            size=trade.size,
            entry=trade.entry,
            exit=trade.exit,
            stop_loss=trade.stop_loss,
            date=trade.date,
            comments=trade.comments,
        )
        computed = draft.auto_pnl(instrument)
        pnl = ComputedValue(computed=computed)
        if computed is None or round(trade.pnl, 2) != computed:
            pnl = pnl.set_manual(trade.pnl)
        return replace(draft, pnl=pnl)

    def to_trade(self, user_id: str, trade_id: Optional[str] = None) -> Trade:
        pnl = self.pnl.value
        return Trade(
            id=trade_id,
            user_id=user_id,
            pair=self.pair,
            direction=self.direction,
            size=float(self.size or 0.0),
            entry=float(self.entry or 0.0),
            exit=float(self.exit or 0.0),
            stop_loss=self.stop_loss,
            pnl=float(pnl) if pnl is not None else 0.0,
            date=self.date,
            comments=self.comments or None,
        )
