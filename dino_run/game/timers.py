# dino_run/game/timers.py
"""
Loop driver for the simulation.

The scheduler owns a millisecond clock, one per-frame callback slot and any
number of fixed-interval timers. Whoever drives it (the pygame loop, the
Gymnasium env, a test) calls ``advance(ms)`` to let wall-clock time pass and
``run_frame()`` once per display frame.
"""
from __future__ import annotations
import itertools
from dataclasses import dataclass
from typing import Callable, Dict, Optional

Callback = Callable[[], None]


@dataclass
class _Timer:
    due_ms: float
    callback: Callback
    interval_ms: float


class Scheduler:
    def __init__(self, start_ms: float = 0.0):
        self.now_ms: float = float(start_ms)
        self._timers: Dict[int, _Timer] = {}
        self._frame: Optional[tuple] = None      # (handle, callback)
        self._ids = itertools.count(1)

    # -------------------- Timers --------------------

    def set_interval(self, interval_ms: float, callback: Callback) -> int:
        if interval_ms <= 0:
            raise ValueError(f"interval must be > 0 ms, got {interval_ms}")
        handle = next(self._ids)
        self._timers[handle] = _Timer(self.now_ms + interval_ms, callback, float(interval_ms))
        return handle

    def cancel(self, handle: Optional[int]) -> None:
        """Cancel a timer or the frame loop. Unknown / stale handles are ignored."""
        if handle is None:
            return
        self._timers.pop(handle, None)
        if self._frame is not None and self._frame[0] == handle:
            self._frame = None

    def pending(self) -> int:
        return len(self._timers)

    # -------------------- Frame loop --------------------

    def start_loop(self, callback: Callback) -> int:
        """Install the per-frame callback, replacing any previous one."""
        handle = next(self._ids)
        self._frame = (handle, callback)
        return handle

    @property
    def looping(self) -> bool:
        return self._frame is not None

    def run_frame(self) -> bool:
        """Run the frame callback once. Returns False when no loop is installed."""
        if self._frame is None:
            return False
        self._frame[1]()
        return True

    # -------------------- Clock --------------------

    def advance(self, ms: float) -> int:
        """
        Move the clock forward by ``ms`` and fire every timer that comes due, in
        due-time order (ties by creation order). A timer cancelled by an earlier
        callback in the same call does not fire. Returns the number of callbacks run.
        """
        target = self.now_ms + max(0.0, float(ms))
        fired = 0
        while True:
            due = [(t.due_ms, h) for h, t in self._timers.items() if t.due_ms <= target]
            if not due:
                break
            due_ms, handle = min(due)
            timer = self._timers[handle]
            self.now_ms = max(self.now_ms, due_ms)
            timer.due_ms += timer.interval_ms
            timer.callback()
            fired += 1
        self.now_ms = target
        return fired
