"""Sync scheduling module."""

from .scheduler import ISyncScheduler, SyncScheduler
from .timer import PollTimer

__all__ = ["ISyncScheduler", "SyncScheduler", "PollTimer"]
