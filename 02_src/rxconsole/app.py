"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .config import Settings
from .event_bus import EventBus
from .export import ExportService, IClipboard, SystemClipboard
from .fetch import FetchClient, IFetchClient
from .logging_config import get_logger
from .metrics import MetricsDeriver
from .models import QueryParams
from .state import StreamState
from .sync import SyncScheduler
from .tracker import TraceLog, Tracker

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    @property
    def stream_state(self) -> StreamState: ...

    @property
    def scheduler(self) -> SyncScheduler: ...

    @property
    def metrics(self) -> MetricsDeriver: ...

    @property
    def export_service(self) -> ExportService: ...

    @property
    def trace_log(self) -> TraceLog: ...


class Application:
    """Wires the RX console core together."""

    def __init__(
        self,
        settings: Settings | None = None,
        fetch_client: IFetchClient | None = None,
        clipboard: IClipboard | None = None,
    ):
        self._settings = settings or Settings.from_env()
        self._injected_fetch_client = fetch_client
        self._injected_clipboard = clipboard

        # Components (will be initialized in start())
        self._event_bus: EventBus | None = None
        self._trace_log: TraceLog | None = None
        self._tracker: Tracker | None = None
        self._stream_state: StreamState | None = None
        self._fetch_client: IFetchClient | None = None
        self._metrics: MetricsDeriver | None = None
        self._scheduler: SyncScheduler | None = None
        self._export_service: ExportService | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting RX console core (backend=%s)", self._settings.api_base)

        # 1. EventBus + trace log (no dependencies)
        self._event_bus = EventBus()
        self._trace_log = TraceLog()

        # 2. Tracker (depends on EventBus + TraceLog)
        self._tracker = Tracker(self._event_bus, self._trace_log)
        await self._tracker.start()

        # 3. StreamState
        self._stream_state = StreamState()

        # 4. FetchClient
        self._fetch_client = self._injected_fetch_client or FetchClient(
            self._settings.api_base,
            timeout=self._settings.http_timeout,
        )

        # 5. MetricsDeriver (reads StreamState on every request)
        self._metrics = MetricsDeriver(self._stream_state)

        # 6. SyncScheduler (sole writer of StreamState)
        self._scheduler = SyncScheduler(
            fetch_client=self._fetch_client,
            stream_state=self._stream_state,
            event_bus=self._event_bus,
            params=QueryParams(limit=self._settings.default_limit),
            interval=self._settings.poll_interval,
        )

        # 7. ExportService
        self._export_service = ExportService(
            clipboard=self._injected_clipboard or SystemClipboard(),
            tracker=self._tracker,
        )
        logger.info("All components initialized")

        if self._settings.start_live:
            await self._scheduler.enable()

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._scheduler:
            await self._scheduler.disable()
            await self._scheduler.drain()
            logger.info("SyncScheduler stopped")
        if self._fetch_client:
            await self._fetch_client.aclose()
            logger.info("FetchClient closed")

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def stream_state(self) -> StreamState:
        """Get stream state instance."""
        if self._stream_state is None:
            raise RuntimeError("Application not started")
        return self._stream_state

    @property
    def scheduler(self) -> SyncScheduler:
        """Get sync scheduler instance."""
        if self._scheduler is None:
            raise RuntimeError("Application not started")
        return self._scheduler

    @property
    def metrics(self) -> MetricsDeriver:
        """Get metrics deriver instance."""
        if self._metrics is None:
            raise RuntimeError("Application not started")
        return self._metrics

    @property
    def export_service(self) -> ExportService:
        """Get export service instance."""
        if self._export_service is None:
            raise RuntimeError("Application not started")
        return self._export_service

    @property
    def trace_log(self) -> TraceLog:
        """Get trace log instance."""
        if self._trace_log is None:
            raise RuntimeError("Application not started")
        return self._trace_log
