"""Delayed-callback schedulers used for debouncing scans."""

import asyncio
import heapq
from collections.abc import Callable
from dataclasses import dataclass, field

from loguru import logger


class LoopScheduler:
    """Schedule callbacks on an asyncio event loop.

    Args:
        loop: Loop to schedule on. Defaults to the loop running at call time.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], object]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


def running_loop_scheduler() -> LoopScheduler | None:
    """Bind to the running asyncio loop, or return None outside one."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        logger.debug("No running event loop, scans will not be debounced")
        return None
    return LoopScheduler(loop)


@dataclass(order=True)
class _Pending:
    due: float
    seq: int
    callback: Callable[[], object] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler driven by an explicit clock.

    Hosts without an event loop call ``advance()`` from their own event pump;
    nothing runs until they do.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[_Pending] = []
        self._seq = 0

    def call_later(self, delay: float, callback: Callable[[], object]) -> _Pending:
        self._seq += 1
        pending = _Pending(due=self.now + delay, seq=self._seq, callback=callback)
        heapq.heappush(self._queue, pending)
        return pending

    @property
    def pending(self) -> int:
        """Number of callbacks scheduled and not cancelled."""
        return sum(1 for p in self._queue if not p.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running callbacks that fall due in order.

        Returns:
            Number of callbacks run.
        """
        target = self.now + seconds
        ran = 0
        while self._queue and self._queue[0].due <= target:
            pending = heapq.heappop(self._queue)
            if pending.cancelled:
                continue
            self.now = pending.due
            pending.callback()
            ran += 1
        self.now = target
        return ran
