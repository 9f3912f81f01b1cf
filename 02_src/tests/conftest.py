"""Pytest configuration and fixtures."""

import asyncio
import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rxconsole.fetch import FetchError  # noqa: E402
from rxconsole.models import PollResult, RxMessage, StatsSnapshot  # noqa: E402


def make_messages(count: int, prefix: str = "m", **fields) -> tuple[RxMessage, ...]:
    """Build a batch of messages with ids prefix0..prefixN."""
    return tuple(
        RxMessage(
            id=f"{prefix}{i}",
            timestamp=fields.get("timestamp", "2024-01-01T00:00:00Z"),
            device=fields.get("device", "RX1"),
            msg_id=i,
            message=f"{prefix} payload {i}",
            ordinal=i,
        )
        for i in range(count)
    )


class FakeFetchClient:
    """Scripted IFetchClient double.

    Returns queued results in order (then the default), records every call's
    params, and can be made to fail or to block until released.
    """

    def __init__(self, default: PollResult | None = None):
        self.default = default or PollResult(
            messages=make_messages(2), stats=StatsSnapshot({"total_received": 2})
        )
        self.queue: list[PollResult | Exception] = []
        self.calls: list = []
        self.fail_with: Exception | None = None
        self.gate: asyncio.Event | None = None
        self.closed = False

    async def fetch(self, params) -> PollResult:
        self.calls.append(params)
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_with is not None:
            raise self.fail_with
        if self.queue:
            item = self.queue.pop(0)
            if isinstance(item, Exception):
                raise item
            return item
        return self.default

    async def aclose(self) -> None:
        self.closed = True


def network_failure() -> FetchError:
    return FetchError({"messages": ConnectionError("connection refused")})


@pytest.fixture
def event_bus():
    """Create EventBus."""
    from rxconsole.event_bus import EventBus

    return EventBus()


@pytest.fixture
def trace_log():
    """Create an empty in-memory trace log."""
    from rxconsole.tracker import TraceLog

    return TraceLog()


@pytest_asyncio.fixture
async def tracker(event_bus, trace_log):
    """Create Tracker subscribed to the event bus."""
    from rxconsole.tracker import Tracker

    tr = Tracker(event_bus=event_bus, trace_log=trace_log)
    await tr.start()
    return tr


@pytest.fixture
def stream_state():
    """Create an empty StreamState."""
    from rxconsole.state import StreamState

    return StreamState()


@pytest.fixture
def fetch_client():
    """Create a scripted fetch client."""
    return FakeFetchClient()


@pytest_asyncio.fixture
async def scheduler(fetch_client, stream_state, event_bus):
    """Create a SyncScheduler with a short cadence."""
    from rxconsole.sync import SyncScheduler

    sc = SyncScheduler(
        fetch_client=fetch_client,
        stream_state=stream_state,
        event_bus=event_bus,
        interval=0.05,
    )
    yield sc
    await sc.disable()
    if fetch_client.gate is not None:
        fetch_client.gate.set()
    await sc.drain()


@pytest.fixture
def memory_clipboard():
    """Create an in-process clipboard."""
    from rxconsole.export import MemoryClipboard

    return MemoryClipboard()
