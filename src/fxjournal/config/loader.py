"""Load configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml

from fxjournal.config.models import (
    AppConfig,
    CacheConfig,
    CalculatorDefaults,
    JournalConfig,
    MonitoringConfig,
)
from fxjournal.instruments import PRIVILEGED_EMAIL
from fxjournal.sizing import SizingInput


def load_config(path: str | Path) -> AppConfig:
    path = Path(path)
    data = _load_yaml(path)

    return AppConfig(
        name=str(_require(data, "name")),
        version=str(_require(data, "version")),
        privileged_email=str(data.get("privileged_email", PRIVILEGED_EMAIL)).strip(),
        instruments=_parse_instruments(data.get("instruments", {}) or {}),
        journal=_parse_journal(data.get("journal", {}) or {}),
        cache=_parse_cache(data.get("cache", {}) or {}),
        monitoring=_parse_monitoring(data.get("monitoring", {}) or {}),
        calculator=_parse_calculator(data.get("calculator", {}) or {}),
    )


def _load_yaml(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config must be a mapping")
    return data


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing required config key: {key}")
    return data[key]


def _positive_float(value: Any, key: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid {key}: {value}") from exc
    if number <= 0:
        raise ValueError(f"Invalid {key}: {value}")
    return number


def _parse_instruments(data: dict[str, Any]) -> dict[str, dict[str, Any]]:
    if not isinstance(data, dict):
        raise ValueError("instruments must be a mapping")
    instruments: dict[str, dict[str, Any]] = {}
    for symbol, payload in data.items():
        payload = payload or {}
        parsed: dict[str, Any] = {}
        if "contract_size" in payload:
            parsed["contract_size"] = _positive_float(payload["contract_size"], f"{symbol}.contract_size")
        if "pip_value_per_lot" in payload:
            parsed["pip_value_per_lot"] = _positive_float(
                payload["pip_value_per_lot"], f"{symbol}.pip_value_per_lot"
            )
        if "quote_currency" in payload:
            parsed["quote_currency"] = str(payload["quote_currency"]).upper()
        instruments[str(symbol)] = parsed
    return instruments


def _parse_journal(data: dict[str, Any]) -> JournalConfig:
    return JournalConfig(db_path=str(data.get("db_path", "runtime/journal.db")))


def _parse_cache(data: dict[str, Any]) -> CacheConfig:
    ttl_ms = int(data.get("ttl_ms", CacheConfig.ttl_ms))
    if ttl_ms <= 0:
        raise ValueError(f"Invalid cache.ttl_ms: {ttl_ms}")
    return CacheConfig(ttl_ms=ttl_ms, key=str(data.get("key", CacheConfig.key)))


def _parse_monitoring(data: dict[str, Any]) -> MonitoringConfig:
    return MonitoringConfig(
        audit_log_path=str(data.get("audit_log_path", "runtime/audit.log")),
    )


def _parse_calculator(data: dict[str, Any]) -> CalculatorDefaults:
    def optional_float(value: Any) -> Optional[float]:
        if value is None:
            return None
        return float(value)

    return CalculatorDefaults(
        balance=optional_float(data.get("balance")),
        risk_percent=float(data.get("risk_percent", 1.0)),
        reward_ratio=float(data.get("reward_ratio", 2.0)),
        pair=str(data.get("pair", "EUR/USD")),
    )


def default_sizing_input(config: AppConfig) -> SizingInput:
    calc = config.calculator
    return SizingInput(
        balance=calc.balance,
        risk_percent=calc.risk_percent,
        reward_ratio=calc.reward_ratio,
        pair=calc.pair,
    )
