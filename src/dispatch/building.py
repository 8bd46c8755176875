from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from selection import Direction, SelectionStrategy, StrategyRegistry, default_registry

from .clock import Clock, SimulatedClock
from .config import ElevatorTimings
from .dispatcher import Dispatcher
from .elevator import Elevator
from .events import EventBus
from .floor import Floor
from .observers import HallCallObserver


class UnknownFloorError(ValueError):
    pass


class UnknownElevatorError(ValueError):
    pass


@dataclass
class Building:
    """Floors and elevators wired to a dispatcher.

    Every elevator serves every floor, and each floor has one hall-call
    observer forwarding presses to the shared dispatcher. Pass ``strategy``
    to inject a selection policy directly; otherwise ``strategy_name`` is
    looked up in ``registry``.
    """

    num_floors: int
    elevator_ids: List[int] = field(default_factory=lambda: [1, 2])
    strategy_name: str = "NearestElevator"
    strategy: Optional[SelectionStrategy] = None
    timings: ElevatorTimings = field(default_factory=ElevatorTimings)
    clock: Clock = field(default_factory=SimulatedClock)
    registry: StrategyRegistry = field(default_factory=default_registry)
    events: EventBus = field(init=False)
    floors: List[Floor] = field(init=False)
    elevators: List[Elevator] = field(init=False)
    dispatcher: Dispatcher = field(init=False)

    def __post_init__(self) -> None:
        self.events = EventBus(self.clock)
        if self.strategy is None:
            self.dispatcher = Dispatcher.from_registry(self.strategy_name, self.registry, self.events)
        else:
            self.dispatcher = Dispatcher(self.strategy, self.events)
            self.strategy_name = self.dispatcher.strategy_name
        self.elevators = []
        for elevator_id in self.elevator_ids:
            if self.get_elevator(elevator_id) is None:
                self.elevators.append(Elevator(elevator_id, events=self.events, timings=self.timings))
        self.floors = [Floor(i) for i in range(self.num_floors)]
        for floor in self.floors:
            for elevator in self.elevators:
                floor.add_elevator(elevator)
            floor.register_observer(HallCallObserver(floor, self.dispatcher))

    def get_floor(self, floor_number: int) -> Optional[Floor]:
        if 0 <= floor_number < self.num_floors:
            return self.floors[floor_number]
        return None

    def get_elevator(self, elevator_id: int) -> Optional[Elevator]:
        for elevator in self.elevators:
            if elevator.elevator_id == elevator_id:
                return elevator
        return None

    def press_external_button(self, floor_number: int, direction: Direction) -> None:
        self._require_floor(floor_number).press_external_button(Direction(direction))

    def add_internal_request(self, elevator_id: int, floor_number: int) -> None:
        self._require_floor(floor_number)
        self._require_elevator(elevator_id).add_internal_request(floor_number)

    def move_elevator(self, elevator_id: int, floor_number: int) -> bool:
        self._require_floor(floor_number)
        return self._require_elevator(elevator_id).move_to_floor(floor_number)

    def set_strategy(self, name: str) -> None:
        self.dispatcher.strategy = self.registry.get(name)
        self.dispatcher.strategy_name = name
        self.strategy_name = name

    def snapshot(self) -> dict:
        return {
            "time": self.clock.now(),
            "strategy": self.dispatcher.strategy_name,
            "floors": [floor.number for floor in self.floors],
            "elevators": [
                {
                    "id": snap.elevator_id,
                    "floor": snap.current_floor,
                    "direction": snap.direction.value,
                    "status": snap.status.value,
                    "door_open": snap.door_open,
                    "pending_up": list(snap.pending_up),
                    "pending_down": list(snap.pending_down),
                }
                for snap in (elevator.snapshot() for elevator in self.elevators)
            ],
        }

    def _require_floor(self, floor_number: int) -> Floor:
        floor = self.get_floor(floor_number)
        if floor is None:
            raise UnknownFloorError(f"Unknown floor {floor_number}; building has floors 0-{self.num_floors - 1}")
        return floor

    def _require_elevator(self, elevator_id: int) -> Elevator:
        elevator = self.get_elevator(elevator_id)
        if elevator is None:
            raise UnknownElevatorError(f"Unknown elevator {elevator_id}")
        return elevator
