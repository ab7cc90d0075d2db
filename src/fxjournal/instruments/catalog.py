"""Static instrument catalog and the capability-resolved instrument set."""

from __future__ import annotations

from typing import Any, Optional

from fxjournal.identity.models import User
from fxjournal.instruments.models import Instrument

DEFAULT_PAIRS: tuple[str, ...] = (
    "EUR/USD",
    "GBP/USD",
    "USD/JPY",
    "USD/CHF",
    "AUD/USD",
    "USD/CAD",
    "NZD/USD",
    "EUR/GBP",
    "EUR/JPY",
    "GBP/JPY",
    "XAU/USD",
)
EXTENDED_PAIRS: tuple[str, ...] = ("WTI",)

PRIVILEGED_EMAIL = "owner@example.com"

_BUILTIN: dict[str, Instrument] = {
    symbol: Instrument.from_symbol(symbol) for symbol in DEFAULT_PAIRS
}
# Approximations, not live contract specs.
_BUILTIN["XAU/USD"] = Instrument("XAU/USD", contract_size=100.0, pip_value_per_lot=1.0, quote_currency="USD")
_BUILTIN["WTI"] = Instrument("WTI", contract_size=1_000.0, pip_value_per_lot=10.0, quote_currency="USD")


def _pick_float(override: Any, default: float) -> float:
    if override is not None and float(override) > 0:
        return float(override)
    return float(default)


def resolve_instrument(symbol: str, overrides: Optional[dict[str, dict]] = None) -> Instrument:
    base = _BUILTIN.get(symbol) or Instrument.from_symbol(symbol)
    payload = (overrides or {}).get(symbol)
    if not payload:
        return base
    return Instrument(
        symbol=symbol,
        contract_size=_pick_float(payload.get("contract_size"), base.contract_size),
        pip_value_per_lot=_pick_float(payload.get("pip_value_per_lot"), base.pip_value_per_lot),
        quote_currency=str(payload.get("quote_currency", base.quote_currency)).upper(),
    )


def is_privileged(user: Optional[User], privileged_email: str = PRIVILEGED_EMAIL) -> bool:
    """Single-tenant capability check: exact email match unlocks the extended set."""
    if user is None or not user.email or not privileged_email:
        return False
    return user.email == privileged_email


def instrument_set(
    user: Optional[User],
    privileged_email: str = PRIVILEGED_EMAIL,
    overrides: Optional[dict[str, dict]] = None,
) -> tuple[Instrument, ...]:
    symbols = DEFAULT_PAIRS
    if is_privileged(user, privileged_email):
        symbols = DEFAULT_PAIRS + EXTENDED_PAIRS
    return tuple(resolve_instrument(symbol, overrides) for symbol in symbols)


def available_symbols(
    user: Optional[User],
    privileged_email: str = PRIVILEGED_EMAIL,
) -> list[str]:
    return [instrument.symbol for instrument in instrument_set(user, privileged_email)]
