from fxjournal.identity import User
from fxjournal.instruments import (
    DEFAULT_PAIRS,
    Instrument,
    available_symbols,
    instrument_set,
    is_privileged,
    resolve_instrument,
)

PRIVILEGED = "owner@example.com"


def test_contract_sizes():
    assert resolve_instrument("EUR/USD").contract_size == 100_000
    assert resolve_instrument("USD/JPY").contract_size == 100_000
    assert resolve_instrument("XAU/USD").contract_size == 100
    assert resolve_instrument("WTI").contract_size == 1_000


def test_pip_values():
    assert resolve_instrument("EUR/USD").pip_value_per_lot == 10
    assert resolve_instrument("GBP/JPY").pip_value_per_lot == 7
    assert resolve_instrument("XAU/USD").pip_value_per_lot == 1
    assert resolve_instrument("WTI").pip_value_per_lot == 10


def test_jpy_quote_detection():
    assert resolve_instrument("USD/JPY").converts_from_jpy is True
    assert resolve_instrument("EUR/JPY").converts_from_jpy is True
    assert resolve_instrument("EUR/USD").converts_from_jpy is False
    assert resolve_instrument("WTI").converts_from_jpy is False


def test_unknown_symbol_uses_fx_defaults():
    instrument = resolve_instrument("CHF/JPY")
    assert instrument == Instrument("CHF/JPY", contract_size=100_000, pip_value_per_lot=7, quote_currency="JPY")


def test_overrides_replace_positive_values_only():
    instrument = resolve_instrument("XAU/USD", {"XAU/USD": {"contract_size": 50, "pip_value_per_lot": 0}})
    assert instrument.contract_size == 50
    assert instrument.pip_value_per_lot == 1


def test_default_set_has_eleven_pairs():
    regular = User(id="u-1", email="trader@example.com")
    symbols = [item.symbol for item in instrument_set(regular, PRIVILEGED)]
    assert symbols == list(DEFAULT_PAIRS)
    assert len(symbols) == 11
    assert "WTI" not in symbols


def test_signed_out_gets_default_set():
    assert [item.symbol for item in instrument_set(None, PRIVILEGED)] == list(DEFAULT_PAIRS)


def test_privileged_email_unlocks_wti():
    owner = User(id="u-2", email=PRIVILEGED)
    symbols = [item.symbol for item in instrument_set(owner, PRIVILEGED)]
    assert symbols[:11] == list(DEFAULT_PAIRS)
    assert symbols[11:] == ["WTI"]


def test_privilege_requires_exact_match():
    assert is_privileged(User(id="u-3", email="Owner@Example.com"), PRIVILEGED) is False
    assert is_privileged(User(id="u-3", email=" owner@example.com"), PRIVILEGED) is False
    assert is_privileged(User(id="u-3", email=PRIVILEGED), "") is False


def test_available_symbols_follow_the_instrument_set():
    assert available_symbols(User(id="u-1", email="trader@example.com"), PRIVILEGED) == list(DEFAULT_PAIRS)
    assert available_symbols(User(id="u-2", email=PRIVILEGED), PRIVILEGED)[-1] == "WTI"
