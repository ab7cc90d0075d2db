"""Position-size engine."""

from fxjournal.sizing.models import LOT_REFERENCE, LotClass, LotReference, RiskMode, SizingInput, SizingResult
from fxjournal.sizing.sizer import classify_lot, compute_sizing, risk_level_pct

__all__ = [
    "LOT_REFERENCE",
    "LotClass",
    "LotReference",
    "RiskMode",
    "SizingInput",
    "SizingResult",
    "classify_lot",
    "compute_sizing",
    "risk_level_pct",
]
