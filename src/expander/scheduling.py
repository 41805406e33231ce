from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from expander.interfaces import TickFn


@dataclass(order=True, slots=True)
class _Pending:
    due: float
    seq: int
    fn: TickFn = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


class ManualScheduler:
    """Virtual-time scheduler driven explicitly by ``advance``.

    Time is in milliseconds. ``clock`` can be handed to systems as their time
    source so ``advance(now)`` sees exactly the simulated timeline.
    """

    def __init__(self, start_ms: float = 0.0) -> None:
        self.now = float(start_ms)
        self._queue: List[_Pending] = []
        self._seq = 0

    def clock(self) -> float:
        return self.now

    def post_now(self, fn: TickFn) -> None:
        self.post_delayed(fn, 0.0)

    def post_delayed(self, fn: TickFn, delay_ms: float) -> None:
        self._seq += 1
        heapq.heappush(self._queue, _Pending(self.now + max(0.0, float(delay_ms)), self._seq, fn))

    def cancel(self, fn: TickFn) -> None:
        for entry in self._queue:
            if entry.fn == fn:
                entry.cancelled = True

    def pending(self) -> int:
        return sum(1 for entry in self._queue if not entry.cancelled)

    def is_pending(self, fn: TickFn) -> bool:
        return any(entry.fn == fn and not entry.cancelled for entry in self._queue)

    def advance(self, ms: float) -> int:
        """Move the clock forward by ``ms`` running every callback that falls due.

        Callbacks posted while running are honoured if they are due inside the
        window. Returns the number of callbacks executed.
        """
        deadline = self.now + max(0.0, float(ms))
        ran = 0
        while self._queue and self._queue[0].due <= deadline:
            entry = heapq.heappop(self._queue)
            if entry.cancelled:
                continue
            self.now = max(self.now, entry.due)
            entry.fn()
            ran += 1
        self.now = deadline
        return ran

    def run_until_idle(self, max_ms: float = 60_000.0, step_ms: float = 1.0) -> float:
        """Advance in ``step_ms`` slices until nothing is pending; return elapsed ms."""
        start = self.now
        while self.pending() and self.now - start < max_ms:
            self.advance(step_ms)
        return self.now - start


class ArcadeScheduler:
    """Scheduler backed by arcade's (pyglet's) clock.

    Only one pending call per callback is kept: posting a callback that is
    already scheduled replaces the earlier request.
    """

    def __init__(self, arcade_module: Any = None) -> None:
        if arcade_module is None:
            import arcade as arcade_module
        self._arcade = arcade_module
        self._callbacks: Dict[TickFn, Callable[[float], None]] = {}

    def post_now(self, fn: TickFn) -> None:
        self.post_delayed(fn, 0.0)

    def post_delayed(self, fn: TickFn, delay_ms: float) -> None:
        self.cancel(fn)

        def callback(_delta_time: float) -> None:
            if self._callbacks.get(fn) is callback:
                del self._callbacks[fn]
            fn()

        self._callbacks[fn] = callback
        self._arcade.schedule_once(callback, max(0.0, float(delay_ms)) / 1000.0)

    def cancel(self, fn: TickFn) -> None:
        callback = self._callbacks.pop(fn, None)
        if callback is not None:
            self._arcade.unschedule(callback)
