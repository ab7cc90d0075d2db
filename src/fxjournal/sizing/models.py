"""Sizing inputs, results and lot classes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RiskMode(str, Enum):
    PERCENT = "percent"
    FIXED_AMOUNT = "fixed"


class LotClass(str, Enum):
    NANO = "nano"
    MICRO = "micro"
    MINI = "mini"
    STANDARD = "standard"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Lot"


@dataclass(frozen=True)
class LotReference:
    lot_class: LotClass
    units: int
    value_per_pip: float


LOT_REFERENCE: tuple[LotReference, ...] = (
    LotReference(LotClass.STANDARD, 100_000, 10.0),
    LotReference(LotClass.MINI, 10_000, 1.0),
    LotReference(LotClass.MICRO, 1_000, 0.10),
    LotReference(LotClass.NANO, 100, 0.01),
)


@dataclass(frozen=True)
class SizingInput:
    """Calculator inputs. Any numeric field left as None counts as zero."""

    balance: Optional[float] = None
    risk_mode: RiskMode = RiskMode.PERCENT
    risk_percent: Optional[float] = 1.0
    risk_amount_fixed: Optional[float] = None
    stop_loss_pips: Optional[float] = None
    pair: str = "EUR/USD"
    reward_ratio: Optional[float] = 2.0

    @property
    def risk_value(self) -> Optional[float]:
        if self.risk_mode == RiskMode.PERCENT:
            return self.risk_percent
        return self.risk_amount_fixed


@dataclass(frozen=True)
class SizingResult:
    risk_amount: float
    lots: float
    lot_class: LotClass
    units: float
    pip_value: float
    potential_profit: float
    take_profit_pips: float
    risk_level_pct: float
