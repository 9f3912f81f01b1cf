"""Synchronization-related data models."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from ..config import DEFAULT_LIMIT, LIMIT_OPTIONS
from .messages import RxMessage
from .stats import StatsSnapshot


class SyncMode(str, Enum):
    """Whether poll cycles recur automatically."""

    LIVE = "live"
    PAUSED = "paused"


@dataclass(frozen=True)
class QueryParams:
    """Parameters of the messages read."""

    limit: int = DEFAULT_LIMIT
    role: str = "RX"

    def __post_init__(self) -> None:
        if self.limit not in LIMIT_OPTIONS:
            raise ValueError(f"limit must be one of {LIMIT_OPTIONS}, got {self.limit!r}")

    def with_limit(self, limit: int) -> "QueryParams":
        return replace(self, limit=limit)


@dataclass(frozen=True)
class PollResult:
    """Both halves of one successful poll cycle."""

    messages: tuple[RxMessage, ...]
    stats: StatsSnapshot


@dataclass(frozen=True)
class StreamSnapshot:
    """A consistent (messages, stats) pair produced by a single poll cycle."""

    messages: tuple[RxMessage, ...] = ()
    stats: StatsSnapshot = field(default_factory=StatsSnapshot)
    version: int = 0  # 0 means nothing fetched yet
    fetched_at: datetime | None = None
