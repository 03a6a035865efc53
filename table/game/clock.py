"""Asyncio timer that drives a table's automatic modes."""

import asyncio
import logging
from typing import Callable

from table.game.engine import BlackjackTable

logger = logging.getLogger(__name__)

# Called after every tick that changed the table
TickListener = Callable[[BlackjackTable], None]


class TableClock:
    """
    Recurring timer for automatic dealing and automated play.

    One asyncio task runs at most; it sleeps for the interval, then calls
    table.tick(). Stopping cancels the task, and the table ignores any tick
    that arrives after its mode was switched off. If a tick or listener
    raises, both modes are switched off. Starting requires a running event
    loop and must happen on its thread.
    """

    def __init__(self, table: BlackjackTable, interval: float | None = None) -> None:
        """
        Initialize the clock.

        Args:
            table: Table to drive
            interval: Seconds between ticks (defaults to the table config)
        """
        self.table = table
        self.interval = interval if interval is not None else table.config.tick_interval
        self._task: asyncio.Task | None = None
        self._listeners: list[TickListener] = []

    def add_listener(self, listener: TickListener) -> None:
        """Register a callback to publish the table after each tick."""
        self._listeners.append(listener)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start_dealing(self) -> bool:
        """Start dealing one card per interval."""
        loop = asyncio.get_running_loop()
        if not self.table.start_dealing():
            return False
        self._ensure_running(loop)
        return True

    def stop_dealing(self) -> bool:
        if not self.table.stop_dealing():
            return False
        self._cancel()
        return True

    def start_auto_play(self) -> bool:
        """Start one automated decision per interval."""
        loop = asyncio.get_running_loop()
        if not self.table.start_auto_play():
            return False
        self._ensure_running(loop)
        return True

    def stop_auto_play(self) -> bool:
        if not self.table.stop_auto_play():
            return False
        self._cancel()
        return True

    def restart(self) -> None:
        """Stop ticking and start a new round."""
        self._cancel()
        self.table.restart()

    def _ensure_running(self, loop: asyncio.AbstractEventLoop) -> None:
        if not self.running:
            self._task = loop.create_task(self._run())
            self._task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Task) -> None:
        """Switch the table's modes off when a run dies on an error."""
        if task.cancelled() or task.exception() is None:
            return
        logger.error("Clock run failed", exc_info=task.exception())
        self.table.stop_timers()

    def _cancel(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _run(self) -> None:
        """Tick until the table has no automatic mode left."""
        logger.debug("Clock started, interval %.3fs", self.interval)
        while self.table.timer_active:
            await asyncio.sleep(self.interval)
            if self.table.tick():
                for listener in list(self._listeners):
                    listener(self.table)
        logger.debug("Clock stopped")

    async def wait(self) -> None:
        """Wait until the current run finishes on its own."""
        if self._task is not None:
            try:
                await self._task
            except asyncio.CancelledError:
                pass
