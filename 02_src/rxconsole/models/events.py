"""EventBus and tracing data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Topic(str, Enum):
    """EventBus topics."""

    STATE_REPLACED = "state_replaced"
    POLL_FAILED = "poll_failed"
    MODE_CHANGED = "mode_changed"


@dataclass
class BusMessage:
    """A notification exchanged through EventBus."""

    id: str
    topic: Topic
    payload: dict  # varies by topic
    source: str  # component that published
    timestamp: datetime


@dataclass
class TraceEvent:
    """A single observability event kept in the in-memory trace log."""

    id: str
    event_type: str  # e.g. "poll_succeeded", "csv_exported"
    actor: str
    data: dict
    timestamp: datetime
