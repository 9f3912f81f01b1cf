"""Core data models for the RX console."""

from .events import BusMessage, Topic, TraceEvent
from .messages import RxMessage
from .stats import StatsSnapshot
from .sync import PollResult, QueryParams, StreamSnapshot, SyncMode

__all__ = [
    # Stream
    "RxMessage",
    "StatsSnapshot",
    "StreamSnapshot",
    "PollResult",
    # Sync
    "SyncMode",
    "QueryParams",
    # Events
    "BusMessage",
    "Topic",
    "TraceEvent",
]
