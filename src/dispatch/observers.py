from __future__ import annotations

from selection import Direction

from .dispatcher import Dispatcher, HallCall
from .floor import Floor


class HallCallObserver:
    """Floor display that forwards button presses to the dispatcher."""

    def __init__(self, floor: Floor, dispatcher: Dispatcher) -> None:
        self.floor = floor
        self.dispatcher = dispatcher

    def update(self, floor_number: int, direction: Direction) -> None:
        self.dispatcher.events.emit("hall_call", floor=floor_number, direction=direction.value)
        self.dispatcher.dispatch(HallCall(floor_number, direction), self.floor.get_elevators())
