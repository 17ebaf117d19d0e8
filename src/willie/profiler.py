"""Start/stop timers keyed by an identifier.

The first toggle of an id starts its timer; the next toggle of the same id
stops it and reports the elapsed milliseconds. Ids are independent.
"""
from __future__ import annotations

import time
from typing import Callable, Dict, Hashable, Optional


class Profiler:
    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._timers: Dict[Hashable, float] = {}

    def toggle(self, key: Hashable) -> Optional[float]:
        """Start the timer for ``key`` (returns None) or stop it (returns ms)."""
        now = self._clock()
        started = self._timers.pop(key, None)
        if started is None:
            self._timers[key] = now
            return None
        return (now - started) * 1000.0

    def running(self, key: Hashable) -> bool:
        return key in self._timers

    def __len__(self) -> int:
        return len(self._timers)


__all__ = ["Profiler"]
