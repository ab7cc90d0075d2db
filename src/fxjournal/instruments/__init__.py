"""Instrument catalog and capability resolution."""

from fxjournal.instruments.catalog import (
    DEFAULT_PAIRS,
    EXTENDED_PAIRS,
    PRIVILEGED_EMAIL,
    available_symbols,
    instrument_set,
    is_privileged,
    resolve_instrument,
)
from fxjournal.instruments.models import (
    JPY_PIP_VALUE,
    STANDARD_CONTRACT_SIZE,
    STANDARD_PIP_VALUE,
    Instrument,
    quote_currency_for,
)

__all__ = [
    "DEFAULT_PAIRS",
    "EXTENDED_PAIRS",
    "Instrument",
    "JPY_PIP_VALUE",
    "PRIVILEGED_EMAIL",
    "STANDARD_CONTRACT_SIZE",
    "STANDARD_PIP_VALUE",
    "available_symbols",
    "instrument_set",
    "is_privileged",
    "quote_currency_for",
    "resolve_instrument",
]
