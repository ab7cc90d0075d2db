"""Monitoring exports."""

from fxjournal.monitoring.audit import AuditLog
from fxjournal.monitoring.monitor import Monitor
from fxjournal.monitoring.notifier import LogNotifier, MemoryNotifier, Notifier

__all__ = [
    "AuditLog",
    "LogNotifier",
    "MemoryNotifier",
    "Monitor",
    "Notifier",
]
