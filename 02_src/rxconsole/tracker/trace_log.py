"""Bounded in-memory trace event log."""

from collections import deque
from datetime import datetime
from typing import Protocol

from ..models import TraceEvent

DEFAULT_CAPACITY = 500


class ITraceLog(Protocol):
    """Session-scoped store of TraceEvents."""

    def append(self, event: TraceEvent) -> None:
        """Record a trace event, evicting the oldest when full."""
        ...

    def get_trace_events(
        self,
        after: datetime | None = None,
        event_types: list[str] | None = None,
        actor: str | None = None,
        limit: int = 100,
    ) -> list[TraceEvent]:
        """Get trace events (newest first) with optional filters."""
        ...

    def clear(self) -> None:
        ...


class TraceLog:
    """Ring buffer of TraceEvents. Nothing outlives the process."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self._events: deque[TraceEvent] = deque(maxlen=capacity)

    def append(self, event: TraceEvent) -> None:
        self._events.append(event)

    def get_trace_events(
        self,
        after: datetime | None = None,
        event_types: list[str] | None = None,
        actor: str | None = None,
        limit: int = 100,
    ) -> list[TraceEvent]:
        result = []
        for event in reversed(self._events):
            if after and event.timestamp <= after:
                continue
            if event_types and event.event_type not in event_types:
                continue
            if actor and event.actor != actor:
                continue
            result.append(event)
            if len(result) >= limit:
                break
        return result

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)
