from __future__ import annotations

import threading
from typing import Optional, Sequence

from .interface import ElevatorSnapshot
from .types import Direction


class RoundRobinStrategy:
    """Hands hall calls to the elevators in turn, ignoring their position."""

    def __init__(self) -> None:
        self._count = 0
        self._lock = threading.Lock()

    def select_elevator(
        self,
        elevators: Sequence[ElevatorSnapshot],
        requesting_floor: int,
        direction: Direction,
    ) -> Optional[ElevatorSnapshot]:
        if not elevators:
            return None
        with self._lock:
            chosen = elevators[self._count % len(elevators)]
            self._count += 1
        return chosen
