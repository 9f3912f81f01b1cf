"""Stream state: the latest reconciled messages and stats."""

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Protocol

from ..models import RxMessage, StatsSnapshot, StreamSnapshot


class IStreamState(Protocol):
    """Read access for consumers; replace() is for the sync scheduler only."""

    @property
    def snapshot(self) -> StreamSnapshot:
        """The current consistent (messages, stats) pair."""
        ...

    def replace(
        self, messages: Iterable[RxMessage], stats: StatsSnapshot
    ) -> StreamSnapshot:
        """Swap messages and stats together."""
        ...


class StreamState:
    """Holds one immutable StreamSnapshot and swaps it as a whole."""

    def __init__(self):
        self._snapshot = StreamSnapshot()

    @property
    def snapshot(self) -> StreamSnapshot:
        return self._snapshot

    @property
    def messages(self) -> tuple[RxMessage, ...]:
        return self._snapshot.messages

    @property
    def stats(self) -> StatsSnapshot:
        return self._snapshot.stats

    @property
    def version(self) -> int:
        return self._snapshot.version

    def replace(
        self, messages: Iterable[RxMessage], stats: StatsSnapshot
    ) -> StreamSnapshot:
        """Install a new snapshot built from one poll cycle.

        The new pair is built first and published with a single attribute
        assignment, so readers never observe messages from one cycle next to
        stats from another.
        """
        snapshot = StreamSnapshot(
            messages=tuple(messages),
            stats=stats,
            version=self._snapshot.version + 1,
            fetched_at=datetime.now(timezone.utc),
        )
        self._snapshot = snapshot
        return snapshot
