"""Configuration models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from fxjournal.cache import DEFAULT_KEY, DEFAULT_TTL_MS
from fxjournal.instruments import PRIVILEGED_EMAIL


@dataclass(frozen=True)
class JournalConfig:
    db_path: str = "runtime/journal.db"


@dataclass(frozen=True)
class CacheConfig:
    ttl_ms: int = DEFAULT_TTL_MS
    key: str = DEFAULT_KEY


@dataclass(frozen=True)
class MonitoringConfig:
    audit_log_path: str = "runtime/audit.log"


@dataclass(frozen=True)
class CalculatorDefaults:
    balance: Optional[float] = None
    risk_percent: float = 1.0
    reward_ratio: float = 2.0
    pair: str = "EUR/USD"


@dataclass(frozen=True)
class AppConfig:
    name: str
    version: str
    privileged_email: str = PRIVILEGED_EMAIL
    instruments: dict[str, dict[str, Any]] = field(default_factory=dict)
    journal: JournalConfig = JournalConfig()
    cache: CacheConfig = CacheConfig()
    monitoring: MonitoringConfig = MonitoringConfig()
    calculator: CalculatorDefaults = CalculatorDefaults()
