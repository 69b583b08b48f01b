"""Cooperative frame scheduler.

All game logic runs on one thread, driven by a periodic tick. Work that has to wait
for a later point in the frame (or a later frame) is expressed as a callback
registered on the scheduler instead of a blocking wait.

A frame is processed in three phases:

1. ``run_pending(delta_time)``: advance the clock, promote due timers and drain the
   ``call_soon`` queue. Callbacks queued while draining run in the same drain, so an
   object spawned by a scene load starts in the same frame the load completes.
2. System updates (performed by the caller).
3. ``run_end_of_frame()``: run callbacks registered with ``call_at_end_of_frame``.
   Callbacks registered while this phase runs are deferred to the next frame.

Example usage:
    scheduler = FrameScheduler()
    handle = scheduler.call_at_end_of_frame(apply_saved_state)

    scheduler.run_pending(1 / 60)
    systems.update_all(1 / 60)
    scheduler.run_end_of_frame()  # apply_saved_state runs here

    handle.cancel()  # no-op once the callback has run
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class ScheduledCallback:
    """Handle for a callback registered on the scheduler.

    Attributes:
        callback: The function to call.
        due_time: Scheduler time at which the callback becomes runnable (timers only).
        cancelled: Whether cancel() was called.
        done: Whether the callback has run.
    """

    def __init__(self, callback: Callable[[], None], due_time: float | None = None) -> None:
        """Initialize the handle."""
        self.callback = callback
        self.due_time = due_time
        self.cancelled = False
        self.done = False

    def cancel(self) -> None:
        """Prevent the callback from running. Has no effect once it has run."""
        self.cancelled = True

    @property
    def active(self) -> bool:
        """True while the callback is still waiting to run."""
        return not (self.cancelled or self.done)

    def _run(self) -> None:
        if not self.active:
            return
        self.done = True
        self.callback()


class FrameScheduler:
    """Schedules callbacks relative to frame boundaries.

    Attributes:
        frame: Number of completed frames.
        time: Total time advanced through run_pending(), in seconds.
    """

    def __init__(self) -> None:
        """Initialize an empty scheduler at frame 0."""
        self.frame = 0
        self.time = 0.0
        self._soon: deque[ScheduledCallback] = deque()
        self._timers: list[ScheduledCallback] = []
        self._end_of_frame: list[ScheduledCallback] = []

    def call_soon(self, callback: Callable[[], None]) -> ScheduledCallback:
        """Run a callback in the next pending drain.

        Args:
            callback: Function taking no arguments.

        Returns:
            Handle that can cancel the callback.
        """
        handle = ScheduledCallback(callback)
        self._soon.append(handle)
        return handle

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCallback:
        """Run a callback once at least ``delay`` seconds of frame time have passed.

        Args:
            delay: Seconds to wait. Values <= 0 behave like call_soon().
            callback: Function taking no arguments.

        Returns:
            Handle that can cancel the callback.
        """
        if delay <= 0:
            return self.call_soon(callback)
        handle = ScheduledCallback(callback, due_time=self.time + delay)
        self._timers.append(handle)
        return handle

    def call_at_end_of_frame(self, callback: Callable[[], None]) -> ScheduledCallback:
        """Run a callback after every system has updated in the current frame.

        Args:
            callback: Function taking no arguments.

        Returns:
            Handle that can cancel the callback.
        """
        handle = ScheduledCallback(callback)
        self._end_of_frame.append(handle)
        return handle

    def run_pending(self, delta_time: float = 0.0) -> None:
        """Advance the clock and drain every runnable callback.

        Args:
            delta_time: Seconds elapsed since the previous frame.
        """
        self.time += delta_time

        due = [timer for timer in self._timers if timer.due_time is not None and timer.due_time <= self.time]
        if due:
            self._timers = [timer for timer in self._timers if timer not in due and timer.active]
            due.sort(key=lambda timer: timer.due_time or 0.0)
            self._soon.extend(due)

        while self._soon:
            self._soon.popleft()._run()

    def run_end_of_frame(self) -> None:
        """Run end-of-frame callbacks and close the frame."""
        batch, self._end_of_frame = self._end_of_frame, []
        for handle in batch:
            handle._run()
        self.frame += 1

    def pending_count(self) -> int:
        """Number of callbacks still waiting to run, across all queues."""
        queues = (self._soon, self._timers, self._end_of_frame)
        return sum(1 for queue in queues for handle in queue if handle.active)

    def clear(self) -> None:
        """Cancel and drop every pending callback."""
        for queue in (self._soon, self._timers, self._end_of_frame):
            for handle in queue:
                handle.cancel()
        self._soon.clear()
        self._timers.clear()
        self._end_of_frame.clear()
        logger.debug("Scheduler cleared")
