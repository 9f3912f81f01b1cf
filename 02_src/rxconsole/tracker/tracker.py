"""Tracker implementation for creating TraceEvents."""

import uuid
from datetime import datetime, timezone
from typing import Protocol

from ..event_bus import IEventBus
from ..models import BusMessage, Topic, TraceEvent
from .trace_log import ITraceLog


class ITracker(Protocol):
    """Creating TraceEvents. Two channels: EventBus subscription + direct calls."""

    async def track(self, event_type: str, actor: str, data: dict) -> None:
        """Create TraceEvent and append it to the trace log."""
        ...


class Tracker:
    """Creates TraceEvents via EventBus subscription and direct track() calls."""

    def __init__(self, event_bus: IEventBus, trace_log: ITraceLog):
        self._event_bus = event_bus
        self._trace_log = trace_log

    async def start(self) -> None:
        """Subscribe to all EventBus topics."""
        for topic in Topic:
            self._event_bus.subscribe(topic, self._handle_bus_message)

    async def _handle_bus_message(self, bus_message: BusMessage) -> None:
        payload = bus_message.payload

        if bus_message.topic is Topic.STATE_REPLACED:
            event_type = "poll_succeeded"
            data = {
                "version": payload.get("version"),
                "message_count": payload.get("message_count"),
                "limit": payload.get("limit"),
            }
        elif bus_message.topic is Topic.POLL_FAILED:
            event_type = "poll_failed"
            data = {
                "failed_reads": payload.get("failed_reads", []),
                "error": payload.get("error"),
                "limit": payload.get("limit"),
            }
        else:
            event_type = bus_message.topic.value
            data = dict(payload)

        await self.track(event_type=event_type, actor=bus_message.source, data=data)

    async def track(self, event_type: str, actor: str, data: dict) -> None:
        """Create TraceEvent and append it to the trace log."""
        self._trace_log.append(
            TraceEvent(
                id=str(uuid.uuid4()),
                event_type=event_type,
                actor=actor,
                data=data,
                timestamp=datetime.now(timezone.utc),
            )
        )
