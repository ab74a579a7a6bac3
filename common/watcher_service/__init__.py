"""Watcher service components."""

from .base import BaseWatcherService
from .manager import CapabilityWatcherService

__all__ = [
    "BaseWatcherService",
    "CapabilityWatcherService",
]
