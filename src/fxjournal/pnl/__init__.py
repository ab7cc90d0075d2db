"""Trade P&L engine."""

from fxjournal.pnl.calculator import compute_pnl, price_difference
from fxjournal.pnl.models import Direction

__all__ = ["Direction", "compute_pnl", "price_difference"]
