"""Position sizing from account risk and stop distance."""

from __future__ import annotations

import math
from typing import Optional

from fxjournal.instruments import STANDARD_CONTRACT_SIZE, Instrument, resolve_instrument
from fxjournal.sizing.models import LotClass, RiskMode, SizingInput, SizingResult


def _value(number: Optional[float]) -> float:
    if number is None or number == "":
        return 0.0
    return float(number)


def _finite(number: float) -> float:
    return number if math.isfinite(number) else 0.0


def classify_lot(lots: float) -> LotClass:
    if lots < 0.01:
        return LotClass.NANO
    if lots < 0.1:
        return LotClass.MICRO
    if lots < 1.0:
        return LotClass.MINI
    return LotClass.STANDARD


def risk_level_pct(inputs: SizingInput) -> float:
    if inputs.risk_mode != RiskMode.PERCENT:
        return 100.0
    return _finite(min(_value(inputs.risk_percent) * 10.0, 100.0))


def compute_sizing(inputs: SizingInput, instrument: Optional[Instrument] = None) -> SizingResult:
    """Recommend a lot size for the given risk.

    Never raises. A zero stop distance yields zero lots, and any non-finite
    intermediate is reported as zero. Units always use the 100,000 standard
    lot, even for instruments with a different contract size.
    """
    if instrument is None:
        instrument = resolve_instrument(inputs.pair)

    balance = _value(inputs.balance)
    stop_loss_pips = _value(inputs.stop_loss_pips)
    reward_ratio = _value(inputs.reward_ratio)

    if inputs.risk_mode == RiskMode.PERCENT:
        risk_amount = balance * _value(inputs.risk_value) / 100
    else:
        risk_amount = _value(inputs.risk_value)

    pip_value = instrument.pip_value_per_lot
    denominator = stop_loss_pips * pip_value
    if denominator == 0:
        lots = 0.0
    else:
        lots = risk_amount / denominator
    units = lots * STANDARD_CONTRACT_SIZE

    lots = _finite(lots)
    units = _finite(units)

    return SizingResult(
        risk_amount=_finite(risk_amount),
        lots=lots,
        lot_class=classify_lot(lots),
        units=units,
        pip_value=pip_value,
        potential_profit=_finite(risk_amount * reward_ratio),
        take_profit_pips=_finite(stop_loss_pips * reward_ratio),
        risk_level_pct=risk_level_pct(inputs),
    )
