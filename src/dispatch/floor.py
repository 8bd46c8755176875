from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol

from selection import Direction

from .elevator import Elevator


class FloorObserver(Protocol):
    def update(self, floor_number: int, direction: Direction) -> None:
        ...


@dataclass(eq=False)
class Floor:
    """A floor with hall buttons, the elevators serving it and its observers."""

    number: int
    elevators: List[Elevator] = field(default_factory=list, init=False)
    observers: List[FloorObserver] = field(default_factory=list, init=False)

    def add_elevator(self, elevator: Elevator) -> None:
        if all(known.elevator_id != elevator.elevator_id for known in self.elevators):
            self.elevators.append(elevator)

    def get_elevators(self) -> List[Elevator]:
        return list(self.elevators)

    def register_observer(self, observer: FloorObserver) -> None:
        if all(known is not observer for known in self.observers):
            self.observers.append(observer)

    def press_external_button(self, direction: Direction) -> None:
        for observer in list(self.observers):
            observer.update(self.number, direction)
