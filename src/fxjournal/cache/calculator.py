"""Session cache for calculator inputs."""

from __future__ import annotations

import json
import time
from dataclasses import asdict, fields, replace
from typing import Any, MutableMapping, Optional

from fxjournal.instruments import Instrument
from fxjournal.sizing import RiskMode, SizingInput, SizingResult, compute_sizing

DEFAULT_TTL_MS = 3_600_000
DEFAULT_KEY = "calcState"

_INPUT_FIELDS = {item.name for item in fields(SizingInput)}
_NUMERIC_FIELDS = ("balance", "risk_percent", "risk_amount_fixed", "stop_loss_pips", "reward_ratio")


def now_ms() -> int:
    return int(time.time() * 1000)


def _serialize_inputs(inputs: SizingInput) -> dict[str, Any]:
    payload = asdict(inputs)
    payload["risk_mode"] = inputs.risk_mode.value
    return payload


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got {value!r}")
    return float(value)


def _parse_inputs(data: dict[str, Any], defaults: SizingInput) -> SizingInput:
    known = {key: value for key, value in data.items() if key in _INPUT_FIELDS}
    if "risk_mode" in known:
        known["risk_mode"] = RiskMode(known["risk_mode"])
    for name in _NUMERIC_FIELDS:
        if name in known:
            known[name] = _optional_float(known[name])
    if "pair" in known and (not isinstance(known["pair"], str) or not known["pair"].strip()):
        raise ValueError(f"Invalid pair: {known['pair']!r}")
    return replace(defaults, **known)


class CalculatorCache:
    """Stores the last calculator inputs in a session mapping.

    Entries are written as ``{"timestamp": <ms>, "data": {...}}``. An entry
    at least ``ttl_ms`` old is deleted instead of restored.
    """

    def __init__(
        self,
        storage: MutableMapping[str, Any],
        ttl_ms: int = DEFAULT_TTL_MS,
        key: str = DEFAULT_KEY,
        monitor: Optional[object] = None,
        audit_log: Optional[object] = None,
    ) -> None:
        self.storage = storage
        self.ttl_ms = ttl_ms
        self.key = key
        self._monitor = monitor
        self._audit_log = audit_log

    def _discard(self, reason: str) -> None:
        self.storage.pop(self.key, None)
        if self._monitor is not None:
            self._monitor.cache_discarded(reason)
        if self._audit_log is not None:
            self._audit_log.log("calculator_cache_discarded", {"key": self.key, "reason": reason})

    def save(self, inputs: SizingInput, timestamp_ms: Optional[int] = None) -> None:
        if timestamp_ms is None:
            timestamp_ms = now_ms()
        self.storage[self.key] = json.dumps({"timestamp": timestamp_ms, "data": _serialize_inputs(inputs)})

    def restore(
        self,
        defaults: Optional[SizingInput] = None,
        timestamp_ms: Optional[int] = None,
    ) -> Optional[SizingInput]:
        raw = self.storage.get(self.key)
        if raw is None:
            return None
        if defaults is None:
            defaults = SizingInput()
        if timestamp_ms is None:
            timestamp_ms = now_ms()

        try:
            payload = json.loads(raw)
            age = timestamp_ms - int(payload["timestamp"])
            data = dict(payload["data"])
        except (TypeError, ValueError, KeyError) as exc:
            self._discard(f"Unreadable calculator state: {exc}")
            return None

        if age >= self.ttl_ms:
            self.storage.pop(self.key, None)
            return None
        try:
            return _parse_inputs(data, defaults)
        except (TypeError, ValueError) as exc:
            self._discard(f"Unreadable calculator state: {exc}")
            return None

    def clear(self) -> None:
        self.storage.pop(self.key, None)


class CalculatorSession:
    """Current calculator inputs; recomputes and caches after every change."""

    def __init__(
        self,
        cache: CalculatorCache,
        defaults: Optional[SizingInput] = None,
        instruments: Optional[dict[str, Instrument]] = None,
    ) -> None:
        self.cache = cache
        self.defaults = defaults or SizingInput()
        self.instruments = instruments or {}
        restored = cache.restore(self.defaults)
        self.inputs = restored if restored is not None else self.defaults

    def result(self) -> SizingResult:
        return compute_sizing(self.inputs, self.instruments.get(self.inputs.pair))

    def update(self, **changes: Any) -> SizingResult:
        if "risk_mode" in changes:
            changes["risk_mode"] = RiskMode(changes["risk_mode"])
        self.inputs = replace(self.inputs, **changes)
        self.cache.save(self.inputs)
        return self.result()
