from __future__ import annotations

import argparse
import json
from dataclasses import asdict, replace
from pathlib import Path

from fxjournal.config import AppConfig, default_sizing_input, load_config
from fxjournal.identity import User
from fxjournal.instruments import available_symbols, instrument_set
from fxjournal.sizing import RiskMode, compute_sizing


def main() -> None:
    parser = argparse.ArgumentParser(description="Print a position-size breakdown as JSON.")
    parser.add_argument("--config", default="configs/journal.yaml")
    parser.add_argument("--email", default=None, help="identity used to resolve the instrument set")
    parser.add_argument("--balance", type=float, default=None)
    parser.add_argument("--risk-percent", type=float, default=None)
    parser.add_argument("--risk-amount", type=float, default=None, help="fixed risk amount; switches to fixed mode")
    parser.add_argument("--stop-loss", type=float, default=None, help="stop-loss distance in pips")
    parser.add_argument("--pair", default=None)
    parser.add_argument("--reward-ratio", type=float, default=None)
    args = parser.parse_args()

    config_path = Path(args.config)
    config = load_config(config_path) if config_path.exists() else AppConfig(name="fxjournal", version="1")
    inputs = default_sizing_input(config)

    changes = {}
    if args.balance is not None:
        changes["balance"] = args.balance
    if args.risk_percent is not None:
        changes["risk_percent"] = args.risk_percent
    if args.risk_amount is not None:
        changes["risk_mode"] = RiskMode.FIXED_AMOUNT
        changes["risk_amount_fixed"] = args.risk_amount
    if args.stop_loss is not None:
        changes["stop_loss_pips"] = args.stop_loss
    if args.pair is not None:
        changes["pair"] = args.pair
    if args.reward_ratio is not None:
        changes["reward_ratio"] = args.reward_ratio
    inputs = replace(inputs, **changes)

    user = User(id=args.email, email=args.email) if args.email else None
    available = {item.symbol: item for item in instrument_set(user, config.privileged_email, config.instruments)}
    if inputs.pair not in available:
        choices = ", ".join(available_symbols(user, config.privileged_email))
        raise SystemExit(f"{inputs.pair} is not available for this account (choose from: {choices})")

    result = compute_sizing(inputs, available[inputs.pair])
    payload = asdict(result)
    payload["lot_class"] = result.lot_class.value
    print(json.dumps({"pair": inputs.pair, "risk_mode": inputs.risk_mode.value, **payload}, indent=2))


if __name__ == "__main__":
    main()
