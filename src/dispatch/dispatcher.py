from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from selection import Direction, SelectionStrategy, StrategyRegistry, default_registry

from .elevator import Elevator
from .events import EventBus


@dataclass(frozen=True)
class HallCall:
    """A directional call placed from a floor."""

    floor: int
    direction: Direction


class Dispatcher:
    """Assigns hall calls to elevators using a selection strategy."""

    def __init__(self, strategy: SelectionStrategy, events: Optional[EventBus] = None, strategy_name: str = "") -> None:
        self.strategy = strategy
        self.strategy_name = strategy_name or type(strategy).__name__
        self.events = events or EventBus()

    @classmethod
    def from_registry(
        cls,
        name: str,
        registry: Optional[StrategyRegistry] = None,
        events: Optional[EventBus] = None,
    ) -> "Dispatcher":
        registry = registry or default_registry()
        return cls(registry.get(name), events=events, strategy_name=name)

    def dispatch(self, call: HallCall, elevators: Iterable[Elevator]) -> Optional[Elevator]:
        by_id: Dict[int, Elevator] = {}
        for elevator in elevators:
            by_id.setdefault(elevator.elevator_id, elevator)
        snapshots = [elevator.snapshot() for elevator in by_id.values()]
        chosen = self.strategy.select_elevator(snapshots, call.floor, call.direction)
        if chosen is None:
            self.events.emit("no_elevator_available", floor=call.floor, direction=call.direction.value)
            return None
        elevator = by_id[chosen.elevator_id]
        self.events.emit(
            "elevator_assigned",
            elevator_id=elevator.elevator_id,
            floor=call.floor,
            direction=call.direction.value,
            strategy=self.strategy_name,
        )
        elevator.add_external_request(call.floor)
        return elevator
