"""Derived metrics over the current stream snapshot."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from ..config import RATE_WINDOW_SECONDS
from ..models import RxMessage, StreamSnapshot
from ..state import IStreamState

RATE_WINDOW = timedelta(seconds=RATE_WINDOW_SECONDS)
PREVIEW_LENGTH = 80


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a message timestamp into an aware UTC datetime.

    Accepts ISO-8601 strings (a trailing "Z" included; no offset means UTC)
    and numbers as epoch milliseconds. Anything else yields None.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)

    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)

    return None


def compute_rate(messages: Sequence[RxMessage], now: datetime) -> int:
    """Count messages whose age relative to now lies in [0, 60s], both inclusive.

    A naive now is read as UTC, like naive message timestamps.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    count = 0
    for message in messages:
        ts = parse_timestamp(message.timestamp)
        if ts is None:
            continue
        if timedelta(0) <= now - ts <= RATE_WINDOW:
            count += 1
    return count


def preview(messages: Sequence[RxMessage]) -> str:
    """Newest message text cut to 80 characters, or "-" when there is none."""
    if not messages:
        return "-"
    text = messages[0].text
    if len(text) > PREVIEW_LENGTH:
        return text[:PREVIEW_LENGTH] + "…"
    return text or "-"


@dataclass(frozen=True)
class DerivedMetrics:
    """Summary figures shown next to the message list."""

    rate_per_min: int
    received_today: int | float
    total_received: int | float
    message_count: int
    last_message_preview: str
    version: int


class MetricsDeriver:
    """Recomputes derived metrics from the stream state on every read; nothing is cached."""

    def __init__(self, stream_state: IStreamState):
        self._stream_state = stream_state

    def derive(
        self, snapshot: StreamSnapshot | None = None, now: datetime | None = None
    ) -> DerivedMetrics:
        """Compute metrics for a snapshot (default: current) at now (default: wall clock)."""
        if snapshot is None:
            snapshot = self._stream_state.snapshot
        if now is None:
            now = datetime.now(timezone.utc)

        stats = snapshot.stats
        return DerivedMetrics(
            rate_per_min=compute_rate(snapshot.messages, now),
            received_today=stats.count("received_today", "sent_today"),
            total_received=stats.count("total_received", "total_messages"),
            message_count=len(snapshot.messages),
            last_message_preview=preview(snapshot.messages),
            version=snapshot.version,
        )
