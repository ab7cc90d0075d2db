from __future__ import annotations

import os
from datetime import date
from pathlib import Path

import streamlit as st

from fxjournal.cache import CalculatorCache, CalculatorSession
from fxjournal.config import AppConfig, default_sizing_input, load_config
from fxjournal.identity import StaticIdentityProvider, User
from fxjournal.instruments import instrument_set
from fxjournal.journal import JournalService, SqliteTradeStore, TradeDraft
from fxjournal.monitoring import AuditLog, MemoryNotifier, Monitor
from fxjournal.pnl import Direction
from fxjournal.sizing import LOT_REFERENCE, RiskMode


def _format_currency(value: float) -> str:
    return f"${value:,.2f}"


def _optional(value: float) -> float | None:
    return None if value == 0 else value


@st.cache_resource
def _load(config_path: str) -> tuple[AppConfig, SqliteTradeStore, AuditLog]:
    path = Path(config_path)
    config = load_config(path) if path.exists() else AppConfig(name="fxjournal", version="1")
    store = SqliteTradeStore(config.journal.db_path)
    audit = AuditLog(config.monitoring.audit_log_path)
    return config, store, audit


def _identity() -> StaticIdentityProvider:
    email = st.sidebar.text_input("Signed in as", value=os.getenv("FXJOURNAL_USER_EMAIL", ""))
    if not email.strip():
        return StaticIdentityProvider(None)
    email = email.strip()
    return StaticIdentityProvider(User(id=email, email=email))


def _flush(notifier: MemoryNotifier) -> None:
    for event, message in notifier.drain():
        if event == "CACHE":
            st.info(message)
        else:
            st.error(message)


def calculator_page(config: AppConfig, identity: StaticIdentityProvider, monitor: Monitor, audit: AuditLog) -> None:
    st.title("Position Size Calculator")
    st.caption("Calculate your exact lot size and manage risk effectively.")

    user = identity.get_current_user()
    instruments = {item.symbol: item for item in instrument_set(user, config.privileged_email, config.instruments)}
    cache = CalculatorCache(
        st.session_state,
        ttl_ms=config.cache.ttl_ms,
        key=config.cache.key,
        monitor=monitor,
        audit_log=audit,
    )
    if st.sidebar.button("Reset calculator"):
        cache.clear()
    session = CalculatorSession(cache, default_sizing_input(config), instruments)
    current = session.inputs

    left, right = st.columns(2)
    with left:
        balance = st.number_input("Account Balance ($)", min_value=0.0, value=float(current.balance or 0.0))
        mode = st.radio(
            "Risk Method",
            [RiskMode.PERCENT.value, RiskMode.FIXED_AMOUNT.value],
            index=0 if current.risk_mode == RiskMode.PERCENT else 1,
            format_func=lambda item: "Percentage %" if item == RiskMode.PERCENT.value else "Fixed Amount $",
            horizontal=True,
        )
        risk_percent = current.risk_percent or 1.0
        risk_fixed = current.risk_amount_fixed
        if mode == RiskMode.PERCENT.value:
            risk_percent = st.slider("Risk Percentage", 0.1, 10.0, float(risk_percent), step=0.1)
        else:
            risk_fixed = st.number_input("Risk Amount ($)", min_value=0.0, value=float(risk_fixed or 0.0))
        stop_loss = st.number_input("Stop Loss (Pips)", min_value=0.0, value=float(current.stop_loss_pips or 0.0))
        symbols = list(instruments)
        pair = st.selectbox(
            "Pair",
            symbols,
            index=symbols.index(current.pair) if current.pair in symbols else 0,
        )
        reward = st.number_input("Risk : Reward Ratio (1 : X)", min_value=0.0, value=float(current.reward_ratio or 0.0))

    result = session.update(
        balance=_optional(balance),
        risk_mode=mode,
        risk_percent=risk_percent,
        risk_amount_fixed=risk_fixed,
        stop_loss_pips=_optional(stop_loss),
        pair=pair,
        reward_ratio=reward,
    )

    with right:
        st.caption("Risk Level")
        st.progress(result.risk_level_pct / 100)
        st.metric("Position Size", f"{result.lots:.2f} Lots")
        st.write(result.lot_class.label)
        st.metric("Risk Amount", f"-{_format_currency(result.risk_amount)}")
        st.metric("Potential Profit", f"+{_format_currency(result.potential_profit)}")
        st.metric("Take Profit Target", f"{result.take_profit_pips:g} pips")
        st.caption("Calculations are estimates. Always verify with your broker.")

    st.subheader("Understanding Forex Lot Sizes")
    columns = st.columns(len(LOT_REFERENCE))
    for column, item in zip(columns, LOT_REFERENCE):
        column.metric(item.lot_class.label, f"{item.units:,} units", f"${item.value_per_pip:g} per pip")
    st.code("Position Size = (Account x Risk%) / (Stop Loss x Pip Value)")


def journal_page(service: JournalService) -> None:
    st.title("Trade Journal")
    st.caption("Track your performance and learn from your history.")

    user = service.current_user()
    if user is None:
        st.info("Sign in to manage your journal.")
        return

    trades = service.list_trades()
    symbols = [item.symbol for item in service.available_instruments()]
    editing = {trade.id: trade for trade in trades}
    selected = st.selectbox("Edit trade", ["New trade"] + list(editing))
    draft = TradeDraft() if selected == "New trade" else service.draft_for(editing[selected])

    with st.form("trade"):
        trade_date = st.date_input("Date", value=draft.date or date.today())
        pair = st.selectbox("Pair", symbols, index=symbols.index(draft.pair) if draft.pair in symbols else 0)
        direction = st.selectbox("Type", [Direction.BUY.value, Direction.SELL.value],
                                 index=0 if draft.direction == Direction.BUY else 1)
        size = st.number_input("Size (lots)", min_value=0.0, value=float(draft.size or 0.0), format="%.2f")
        entry = st.number_input("Entry", min_value=0.0, value=float(draft.entry or 0.0), format="%.5f")
        exit_price = st.number_input("Exit", min_value=0.0, value=float(draft.exit or 0.0), format="%.5f")
        stop_loss = st.number_input("Stop Loss", min_value=0.0, value=float(draft.stop_loss or 0.0), format="%.5f")
        manual = st.checkbox("Override P&L", value=draft.pnl.overridden)
        pnl = st.number_input("P&L ($)", value=float(draft.pnl.value or 0.0), format="%.2f")
        comments = st.text_area("Comments", value=draft.comments or "")
        submitted = st.form_submit_button("Save Trade")

    if submitted:
        shown = float(draft.pnl.value or 0.0)
        draft = draft.with_changes(
            instrument=service.instrument_for(pair),
            date=trade_date,
            pair=pair,
            direction=direction,
            size=_optional(size),
            entry=_optional(entry),
            exit=_optional(exit_price),
            stop_loss=_optional(stop_loss),
            comments=comments.strip() or None,
        )
        draft = draft.with_pnl_field(pnl, shown, override=manual)
        st.caption(f"Computed P&L: {draft.pnl.computed}")
        if selected == "New trade":
            outcome = service.add_trade(draft)
        else:
            outcome = service.update_trade(selected, draft)
        if outcome.ok:
            st.success(outcome.message)
            trades = outcome.trades
        else:
            st.warning(outcome.message)

    if not trades:
        st.write("No trades recorded yet. Start journaling!")
        return

    st.dataframe(
        [
            {
                "date": trade.date.isoformat(),
                "pair": trade.pair,
                "type": trade.direction.value,
                "size": trade.size,
                "entry": trade.entry,
                "exit": trade.exit,
                "stop_loss": trade.stop_loss,
                "pnl": trade.pnl,
                "comments": trade.comments or "",
                "id": trade.id,
            }
            for trade in trades
        ],
        use_container_width=True,
    )
    doomed = st.selectbox("Delete trade", [""] + [trade.id for trade in trades])
    if doomed and st.button("Delete"):
        outcome = service.delete_trade(doomed)
        if outcome.ok:
            st.success(outcome.message)
            st.rerun()
        else:
            st.warning(outcome.message)


def main() -> None:
    st.set_page_config(page_title="FX Journal", layout="wide")
    config_path = os.getenv("FXJOURNAL_CONFIG", "configs/journal.yaml")
    config, store, audit = _load(config_path)

    notifier = MemoryNotifier()
    monitor = Monitor(notifier)
    identity = _identity()
    service = JournalService(
        store,
        identity,
        monitor=monitor,
        audit_log=audit,
        privileged_email=config.privileged_email,
        instrument_overrides=config.instruments,
    )

    page = st.sidebar.radio("Page", ["Calculator", "Journal"])
    if page == "Calculator":
        calculator_page(config, identity, monitor, audit)
    else:
        journal_page(service)
    _flush(notifier)


if __name__ == "__main__":
    main()
