import math

import pytest

from fxjournal.instruments import resolve_instrument
from fxjournal.pnl import Direction, compute_pnl


def test_buy_eurusd():
    assert compute_pnl(Direction.BUY, 1, 1.1000, 1.1050, resolve_instrument("EUR/USD")) == 500.00


def test_sell_eurusd_loss():
    assert compute_pnl(Direction.SELL, 0.5, 1.1000, 1.1020, "EUR/USD") == -100.00


def test_sell_usdjpy_converts_with_exit_price():
    # 0.50 * 1 * 100000 = 50000 JPY, divided by the exit price as the rate.
    assert compute_pnl(Direction.SELL, 1, 150.00, 149.50, resolve_instrument("USD/JPY")) == 334.45


def test_gold_uses_hundred_unit_contract():
    assert compute_pnl(Direction.BUY, 2, 2300.00, 2310.50, "XAU/USD") == 2100.00


def test_oil_uses_thousand_unit_contract():
    assert compute_pnl(Direction.SELL, 1, 80.00, 78.50, "WTI") == 1500.00


def test_accepts_direction_strings():
    assert compute_pnl("BUY", 1, 1.2500, 1.2400, "GBP/USD") == -1000.00


@pytest.mark.parametrize(
    "size, entry, exit",
    [
        (None, 1.1, 1.2),
        (1, None, 1.2),
        (1, 1.1, None),
        (0, 1.1, 1.2),
        (1, 0, 1.2),
        (1, 1.1, 0),
        (-1, 1.1, 1.2),
        (1, -1.1, 1.2),
        (1, 1.1, -1.2),
    ],
)
def test_incomplete_inputs_are_undefined(size, entry, exit):
    assert compute_pnl(Direction.BUY, size, entry, exit, "EUR/USD") is None


def test_rounds_to_cents():
    value = compute_pnl(Direction.BUY, 0.37, 1.08123, 1.08456, "EUR/USD")
    assert value == round(value, 2)
    assert value == pytest.approx(123.21)


@pytest.mark.parametrize(
    "size, entry, exit",
    [
        (1, math.inf, math.inf),
        (math.inf, 1.1000, 1.1050),
        (1, 1.1000, math.nan),
    ],
)
def test_non_finite_inputs_are_undefined(size, entry, exit):
    assert compute_pnl(Direction.BUY, size, entry, exit, "EUR/USD") is None
