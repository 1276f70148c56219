from __future__ import annotations
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Optional


@dataclass(order=True)
class TimerHandle:
    due_ms: float
    seq: int
    fn: Callable[[], None] = field(compare=False)
    interval_ms: Optional[float] = field(default=None, compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class Timers:
    """
    Millisecond timer queue driven by the host loop.

    The loop calls `run_due(now)` once per frame; callbacks whose deadline
    has passed fire in deadline order (ties in scheduling order). One-shot
    timers missed during a stall all fire, each at its own deadline; a
    repeating timer fires once and resumes on its grid. Nothing runs on its
    own thread.
    """

    def __init__(self, now_ms: float = 0.0):
        self.now_ms = float(now_ms)
        self._queue: List[TimerHandle] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: float, fn: Callable[[], None]) -> TimerHandle:
        return self._push(self.now_ms + max(0.0, delay_ms), fn, None)

    def call_every(self, interval_ms: float, fn: Callable[[], None]) -> TimerHandle:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be > 0, got {interval_ms}")
        return self._push(self.now_ms + interval_ms, fn, float(interval_ms))

    def _push(self, due: float, fn, interval) -> TimerHandle:
        h = TimerHandle(due_ms=due, seq=next(self._seq), fn=fn, interval_ms=interval)
        heapq.heappush(self._queue, h)
        return h

    def pending(self) -> int:
        return sum(1 for h in self._queue if not h.cancelled)

    def run_due(self, now_ms: float) -> int:
        """Advance the clock to `now_ms` and fire everything due. Returns the number fired."""
        fired = 0
        while self._queue and self._queue[0].due_ms <= now_ms:
            h = heapq.heappop(self._queue)
            if h.cancelled:
                continue
            # callbacks see the clock at their own deadline so re-arming is drift-free
            self.now_ms = max(self.now_ms, h.due_ms)
            if h.interval_ms is not None:
                # repeating timers fire once per run and skip missed periods
                h.due_ms += h.interval_ms
                while h.due_ms <= now_ms:
                    h.due_ms += h.interval_ms
                h.seq = next(self._seq)
                heapq.heappush(self._queue, h)
            h.fn()
            fired += 1
        self.now_ms = max(self.now_ms, float(now_ms))
        return fired
