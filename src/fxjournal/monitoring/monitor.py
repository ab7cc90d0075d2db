"""User-facing alert routing."""

from __future__ import annotations

from dataclasses import dataclass

from fxjournal.monitoring.notifier import Notifier


@dataclass
class Monitor:
    notifier: Notifier

    def validation_failed(self, message: str) -> None:
        self.notifier.notify("VALIDATION", message)

    def store_failure(self, action: str, message: str) -> None:
        self.notifier.notify("STORE_FAILURE", f"Failed to {action}: {message}")

    def cache_discarded(self, reason: str) -> None:
        self.notifier.notify("CACHE", reason)
