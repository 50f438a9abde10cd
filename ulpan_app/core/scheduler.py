"""
Cooperative timer queue.

Practice sessions are single-threaded: user input and "advance after
feedback" callbacks are processed by one logical thread. Deferred callbacks
are therefore queued here and fired by whoever owns the loop (the HTTP layer
on each request, or a test) through ``run_due()``. Nothing runs in the
background.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, List, Optional

logger = logging.getLogger(__name__)


@dataclass(order=True)
class ScheduledTask:
    """A callback due at ``deadline`` (clock seconds)."""

    deadline: float
    sequence: int
    callback: Callable[[], Any] = field(compare=False)
    key: Optional[Hashable] = field(default=None, compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class TimerQueue:
    """Deadline-ordered queue of deferred callbacks."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._heap: List[ScheduledTask] = []
        self._counter = itertools.count()

    def schedule(
        self,
        delay: float,
        callback: Callable[[], Any],
        key: Optional[Hashable] = None,
    ) -> ScheduledTask:
        """Queue ``callback`` to fire ``delay`` seconds from now."""
        task = ScheduledTask(
            deadline=self._clock() + max(0.0, float(delay)),
            sequence=next(self._counter),
            callback=callback,
            key=key,
        )
        heapq.heappush(self._heap, task)
        return task

    def cancel_keyed(self, key: Hashable) -> int:
        """Cancel every pending task scheduled under ``key``."""
        cancelled = 0
        for task in self._heap:
            if task.key == key and not task.cancelled:
                task.cancel()
                cancelled += 1
        return cancelled

    def pending(self) -> int:
        return sum(1 for task in self._heap if not task.cancelled)

    def run_due(self) -> int:
        """
        Fire all tasks whose deadline has passed, in deadline order.

        Callbacks may schedule further tasks; those fire in the same call
        only if they are already due. Returns the number of callbacks run.
        """
        fired = 0
        while self._heap and self._heap[0].deadline <= self._clock():
            task = heapq.heappop(self._heap)
            if task.cancelled:
                continue
            logger.debug("Firing deferred task key=%s", task.key)
            task.callback()
            fired += 1
        return fired

    def clear(self) -> None:
        for task in self._heap:
            task.cancel()
        self._heap.clear()
