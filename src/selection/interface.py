from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Tuple

from .types import Direction, ElevatorStatus


@dataclass(frozen=True)
class ElevatorSnapshot:
    """Consistent, immutable view of an elevator for selection decisions."""

    elevator_id: int
    current_floor: int
    direction: Direction
    status: ElevatorStatus = ElevatorStatus.STOPPED
    door_open: bool = False
    pending_up: Tuple[int, ...] = ()
    pending_down: Tuple[int, ...] = ()

    @property
    def idle(self) -> bool:
        return self.direction is Direction.NONE

    def distance_to(self, floor: int) -> int:
        return abs(self.current_floor - floor)


class SelectionStrategy(Protocol):
    """Strategy interface for choosing the elevator that serves a hall call."""

    def select_elevator(
        self,
        elevators: Sequence[ElevatorSnapshot],
        requesting_floor: int,
        direction: Direction,
    ) -> Optional[ElevatorSnapshot]:
        """
        Return the snapshot of the elevator that should serve the call.

        ``None`` means no elevator is available; callers report it and
        drop the call.
        """
        ...
