from __future__ import annotations

import threading
import time
from typing import Protocol


class Clock(Protocol):
    """Time source the elevators block on while travelling or holding doors."""

    def now(self) -> float:
        ...

    def sleep(self, duration: float) -> None:
        ...


class SimulatedClock:
    """Logical clock: sleeping advances time instantly instead of blocking."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._lock = threading.Lock()

    def now(self) -> float:
        with self._lock:
            return self._now

    def sleep(self, duration: float) -> None:
        if duration <= 0:
            return
        with self._lock:
            self._now += duration

    def advance(self, duration: float) -> None:
        self.sleep(duration)


class RealClock:
    """Wall-clock time source; sleeping blocks the calling thread."""

    def __init__(self) -> None:
        self._origin = time.monotonic()

    def now(self) -> float:
        return time.monotonic() - self._origin

    def sleep(self, duration: float) -> None:
        if duration > 0:
            time.sleep(duration)
