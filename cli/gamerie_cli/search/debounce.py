"""Debounce a changing value until it has been stable for a fixed delay."""

import asyncio
from typing import Callable, Generic, Optional, Protocol, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class TimerHandle(Protocol):
    """Anything with a ``stop()`` method, such as ``textual.timer.Timer``."""

    def stop(self) -> None: ...


# Schedules ``callback`` after ``delay`` seconds; ``Widget.set_timer`` fits
Scheduler = Callable[[float, Callable[[], None]], TimerHandle]


class _LoopTimer:
    """Adapts an asyncio ``TimerHandle`` to the ``stop()`` interface."""

    def __init__(self, handle: asyncio.TimerHandle) -> None:
        self._handle = handle

    def stop(self) -> None:
        self._handle.cancel()


def loop_scheduler(delay: float, callback: Callable[[], None]) -> TimerHandle:
    """Schedule on the running asyncio loop."""
    loop = asyncio.get_running_loop()
    return _LoopTimer(loop.call_later(delay, callback))


class Debouncer(Generic[T]):
    """Emit only the terminal value of a burst of changes.

    Every ``push`` restarts the wait. ``cancel`` drops any pending emission
    and makes later pushes no-ops.
    """

    def __init__(
        self,
        delay: float,
        callback: Callable[[T], None],
        scheduler: Scheduler = loop_scheduler,
    ) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self.delay = delay
        self._callback = callback
        self._scheduler = scheduler
        self._timer: Optional[TimerHandle] = None
        # Bumped on every push and cancel so a late timer callback is ignored
        self._generation = 0
        self._cancelled = False

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def push(self, value: T) -> None:
        """Restart the wait with a new value."""
        if self._cancelled:
            return
        self._stop_timer()
        self._generation += 1
        generation = self._generation
        self._timer = self._scheduler(self.delay, lambda: self._fire(value, generation))

    def cancel(self) -> None:
        """Drop the pending value, permanently."""
        self._cancelled = True
        self._generation += 1
        self._stop_timer()

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _fire(self, value: T, generation: int) -> None:
        if self._cancelled or generation != self._generation:
            logger.debug("Dropped stale debounce callback", generation=generation)
            return
        self._timer = None
        self._callback(value)
