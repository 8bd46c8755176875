from __future__ import annotations

from typing import List, Optional, Sequence

from .interface import ElevatorSnapshot
from .types import Direction


class NearestElevatorStrategy:
    """Picks the closest elevator that can take the call without reversing.

    When no elevator travelling the right way qualifies, idle elevators are
    considered regardless of where they are.
    """

    def select_elevator(
        self,
        elevators: Sequence[ElevatorSnapshot],
        requesting_floor: int,
        direction: Direction,
    ) -> Optional[ElevatorSnapshot]:
        candidates = [e for e in elevators if self._is_eligible(e, requesting_floor, direction)]
        if not candidates:
            candidates = [e for e in elevators if e.idle]
        return self._nearest(candidates, requesting_floor)

    def _is_eligible(self, elevator: ElevatorSnapshot, requesting_floor: int, direction: Direction) -> bool:
        if direction is Direction.UP:
            return elevator.current_floor <= requesting_floor and elevator.direction in (
                Direction.UP,
                Direction.NONE,
            )
        if direction is Direction.DOWN:
            return elevator.current_floor >= requesting_floor and elevator.direction in (
                Direction.DOWN,
                Direction.NONE,
            )
        return False

    def _nearest(self, candidates: List[ElevatorSnapshot], requesting_floor: int) -> Optional[ElevatorSnapshot]:
        if not candidates:
            return None
        # sorted() is stable: equal distances keep their original order
        candidates = sorted(candidates, key=lambda e: e.distance_to(requesting_floor))
        return candidates[0]
