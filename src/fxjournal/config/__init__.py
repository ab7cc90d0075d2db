"""Config loading."""

from fxjournal.config.loader import default_sizing_input, load_config
from fxjournal.config.models import (
    AppConfig,
    CacheConfig,
    CalculatorDefaults,
    JournalConfig,
    MonitoringConfig,
)

__all__ = [
    "AppConfig",
    "CacheConfig",
    "CalculatorDefaults",
    "JournalConfig",
    "MonitoringConfig",
    "default_sizing_input",
    "load_config",
]
