"""Transient calculator cache."""

from fxjournal.cache.calculator import (
    DEFAULT_KEY,
    DEFAULT_TTL_MS,
    CalculatorCache,
    CalculatorSession,
    now_ms,
)

__all__ = [
    "CalculatorCache",
    "CalculatorSession",
    "DEFAULT_KEY",
    "DEFAULT_TTL_MS",
    "now_ms",
]
