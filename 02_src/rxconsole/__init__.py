"""RX console core: live sync, metrics and export for the received-message stream."""

from .app import Application, IApplication
from .config import Settings
from .event_bus import EventBus, IEventBus
from .export import CsvExport, ExportService, IClipboard, IExportService
from .fetch import FetchClient, FetchError, IFetchClient
from .metrics import DerivedMetrics, MetricsDeriver, compute_rate
from .models import (
    BusMessage,
    PollResult,
    QueryParams,
    RxMessage,
    StatsSnapshot,
    StreamSnapshot,
    SyncMode,
    Topic,
    TraceEvent,
)
from .state import IStreamState, StreamState
from .sync import ISyncScheduler, PollTimer, SyncScheduler
from .tracker import ITracker, TraceLog, Tracker

__all__ = [
    # Application
    "Application",
    "IApplication",
    "Settings",
    # Models
    "RxMessage",
    "StatsSnapshot",
    "StreamSnapshot",
    "PollResult",
    "QueryParams",
    "SyncMode",
    "BusMessage",
    "Topic",
    "TraceEvent",
    # Components
    "IFetchClient",
    "FetchClient",
    "FetchError",
    "IStreamState",
    "StreamState",
    "ISyncScheduler",
    "SyncScheduler",
    "PollTimer",
    "DerivedMetrics",
    "MetricsDeriver",
    "compute_rate",
    "IExportService",
    "ExportService",
    "CsvExport",
    "IClipboard",
    "IEventBus",
    "EventBus",
    "ITracker",
    "Tracker",
    "TraceLog",
]
