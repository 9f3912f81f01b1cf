"""SyncScheduler: drives poll cycles in live mode and on demand."""

import asyncio
from typing import Protocol

from ..config import DEFAULT_POLL_INTERVAL
from ..event_bus import IEventBus
from ..fetch import FetchError, IFetchClient
from ..logging_config import get_logger
from ..models import QueryParams, SyncMode, Topic
from ..state import StreamState
from .timer import PollTimer

logger = get_logger(__name__)


class ISyncScheduler(Protocol):
    """Poll cadence control. The only writer of StreamState."""

    async def enable(self) -> None:
        """Enter live mode: start the repeating timer and fetch once immediately."""
        ...

    async def disable(self) -> None:
        """Leave live mode. In-flight fetches still complete."""
        ...

    async def refresh_once(self) -> bool:
        """Run exactly one poll cycle outside the cadence."""
        ...

    async def set_limit(self, limit: int) -> None:
        """Change the message limit, refetch, and restart the cadence if live."""
        ...


class SyncScheduler:
    """Polls the backend every interval seconds while live.

    Overlapping poll cycles are allowed to race: each successful cycle replaces
    the whole stream snapshot, so the last one to complete wins.
    """

    def __init__(
        self,
        fetch_client: IFetchClient,
        stream_state: StreamState,
        event_bus: IEventBus,
        params: QueryParams | None = None,
        interval: float = DEFAULT_POLL_INTERVAL,
    ):
        self._fetch_client = fetch_client
        self._stream_state = stream_state
        self._event_bus = event_bus
        self._params = params or QueryParams()
        self._interval = interval

        self._mode = SyncMode.PAUSED
        self._timer: PollTimer | None = None
        self._in_flight: set[asyncio.Task] = set()

    @property
    def mode(self) -> SyncMode:
        return self._mode

    @property
    def is_live(self) -> bool:
        return self._mode is SyncMode.LIVE

    @property
    def params(self) -> QueryParams:
        return self._params

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def timer(self) -> PollTimer | None:
        """The single active timer handle, or None when idle."""
        return self._timer

    @property
    def in_flight(self) -> int:
        """Number of tick-spawned polls still awaiting the backend."""
        return len(self._in_flight)

    async def enable(self) -> None:
        if self._timer is not None:
            return

        logger.info("Live mode enabled (interval=%ss)", self._interval)
        self._mode = SyncMode.LIVE
        self._start_timer()
        await self._emit_mode_changed()
        await self.refresh_once()

    async def disable(self) -> None:
        self._stop_timer()
        if self._mode is SyncMode.PAUSED:
            return

        logger.info("Live mode paused")
        self._mode = SyncMode.PAUSED
        await self._emit_mode_changed()

    async def refresh_once(self) -> bool:
        return await self._poll(self._params)

    async def set_limit(self, limit: int) -> None:
        self._params = self._params.with_limit(limit)
        logger.info("Message limit set to %d", limit)

        if self._timer is not None:
            self._start_timer()

        await self.refresh_once()

    async def drain(self) -> None:
        """Wait for tick-spawned polls that are still in flight."""
        if self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)

    def _start_timer(self) -> None:
        # Replacing the handle always releases the previous timer first
        self._stop_timer()
        self._timer = PollTimer(self._interval, self._on_tick)
        self._timer.start()

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_tick(self) -> None:
        task = asyncio.create_task(self._poll(self._params))
        self._in_flight.add(task)
        task.add_done_callback(self._on_poll_done)

    def _on_poll_done(self, task: asyncio.Task) -> None:
        self._in_flight.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Scheduled poll crashed: %s", exc, exc_info=exc)

    async def _poll(self, params: QueryParams) -> bool:
        """One poll cycle. A failure keeps the previous snapshot in place."""
        try:
            result = await self._fetch_client.fetch(params)
        except FetchError as e:
            logger.warning(
                "RX fetch failed: %s",
                e,
                extra={
                    "context": {
                        "failed_reads": e.failed_reads,
                        "partial": e.partial,
                        "limit": params.limit,
                    }
                },
            )
            await self._event_bus.emit(
                Topic.POLL_FAILED,
                {
                    "failed_reads": e.failed_reads,
                    "error": str(e),
                    "limit": params.limit,
                },
                source="sync_scheduler",
            )
            return False

        snapshot = self._stream_state.replace(result.messages, result.stats)
        await self._event_bus.emit(
            Topic.STATE_REPLACED,
            {
                "version": snapshot.version,
                "message_count": len(snapshot.messages),
                "limit": params.limit,
            },
            source="sync_scheduler",
        )
        return True

    async def _emit_mode_changed(self) -> None:
        await self._event_bus.emit(
            Topic.MODE_CHANGED,
            {"mode": self._mode.value, "limit": self._params.limit},
            source="sync_scheduler",
        )
