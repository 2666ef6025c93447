"""
Debounce Scheduler
==================
Collapses bursts of input changes into one submit per quiet period.
"""
import asyncio
from typing import Callable, Optional

from transluxe.config import config
from transluxe.models.translation import InputSnapshot
from transluxe.utils.logging import get_logger


class DebounceScheduler:
    """
    Trailing-edge debounce on an asyncio event loop.

    Every call to ``on_input_change`` cancels the pending timer and arms a
    new one; only the last snapshot of a burst reaches ``submit``. Must be
    used from the loop's own thread.
    """

    def __init__(
        self,
        submit: Callable[[InputSnapshot], None],
        loop: asyncio.AbstractEventLoop,
        quiet_period: float = None
    ):
        self.submit = submit
        self.loop = loop
        self.quiet_period = quiet_period if quiet_period is not None else config.pipeline.debounce_seconds
        self.logger = get_logger().app_logger
        self._handle: Optional[asyncio.TimerHandle] = None
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def on_input_change(self, snapshot: InputSnapshot):
        """(Re)arm the timer for this snapshot."""
        if self._closed:
            return
        self._cancel()
        self._handle = self.loop.call_later(self.quiet_period, self._fire, snapshot)

    def _fire(self, snapshot: InputSnapshot):
        self._handle = None
        self.logger.debug(
            f"Debounce fired: {len(snapshot.text)} chars {snapshot.source_lang}->{snapshot.target_lang}"
        )
        self.submit(snapshot)

    def _cancel(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def close(self):
        """Cancel any pending timer; later input changes are ignored."""
        self._closed = True
        self._cancel()
