"""Realized profit and loss for a logged trade."""

from __future__ import annotations

import math
from typing import Optional

from fxjournal.instruments import Instrument, resolve_instrument
from fxjournal.pnl.models import Direction


def _positive(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def price_difference(direction: Direction, entry: float, exit: float) -> float:
    if Direction(direction) == Direction.BUY:
        return exit - entry
    return entry - exit


def compute_pnl(
    direction: Direction,
    size: Optional[float],
    entry: Optional[float],
    exit: Optional[float],
    instrument: Instrument | str,
) -> Optional[float]:
    """Return P&L in account currency rounded to cents, or None if inputs are incomplete.

    JPY-quoted profit is converted using the exit price as the rate. That is
    an approximation, not a live USD/JPY conversion.
    """
    if not (_positive(size) and _positive(entry) and _positive(exit)):
        return None
    if isinstance(instrument, str):
        instrument = resolve_instrument(instrument)

    profit = price_difference(direction, entry, exit) * size * instrument.contract_size
    if instrument.converts_from_jpy:
        profit = profit / exit
    return round(profit, 2)
