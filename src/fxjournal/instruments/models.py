"""Instrument models for sizing and P&L."""

from __future__ import annotations

from dataclasses import dataclass

STANDARD_CONTRACT_SIZE = 100_000.0
STANDARD_PIP_VALUE = 10.0
# Stand-in for a live JPY conversion rate.
JPY_PIP_VALUE = 7.0


@dataclass(frozen=True)
class Instrument:
    symbol: str
    contract_size: float = STANDARD_CONTRACT_SIZE
    pip_value_per_lot: float = STANDARD_PIP_VALUE
    quote_currency: str = "USD"

    @property
    def converts_from_jpy(self) -> bool:
        """True when profit comes out in JPY and must be divided by the exit price."""
        return self.quote_currency == "JPY"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Instrument":
        quote = quote_currency_for(symbol)
        pip_value = JPY_PIP_VALUE if quote == "JPY" else STANDARD_PIP_VALUE
        return cls(symbol=symbol, pip_value_per_lot=pip_value, quote_currency=quote)


def quote_currency_for(symbol: str) -> str:
    if "/" not in symbol:
        return "USD"
    return symbol.split("/", 1)[1].strip().upper()
