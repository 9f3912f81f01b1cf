"""Repeating poll timer handle."""

import asyncio
from typing import Callable

from ..logging_config import get_logger

logger = get_logger(__name__)


class PollTimer:
    """A repeating asyncio timer owned by exactly one scheduler.

    on_tick is a plain callable and must not block; it is invoked once per
    interval until cancel() is called.
    """

    def __init__(self, interval: float, on_tick: Callable[[], None]):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._interval = interval
        self._on_tick = on_tick
        self._task: asyncio.Task | None = None
        self.ticks = 0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self._task is not None:
            raise RuntimeError("PollTimer already started")
        self._task = asyncio.create_task(self._run())

    def cancel(self) -> None:
        """Stop the timer. Safe to call more than once."""
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def _run(self) -> None:
        while True:
            try:
                await asyncio.sleep(self._interval)
            except asyncio.CancelledError:
                break

            self.ticks += 1
            try:
                self._on_tick()
            except Exception as e:
                logger.error("Poll timer tick failed: %s", e, exc_info=True)
