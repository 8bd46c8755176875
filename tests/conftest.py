from __future__ import annotations

from typing import List, Optional

import pytest

from dispatch import Event, EventBus, SimulatedClock


class EventRecorder:
    def __init__(self, bus: EventBus) -> None:
        self.events: List[Event] = []
        bus.on_event("*", self.events.append)

    def named(self, name: str) -> List[Event]:
        return [event for event in self.events if event.name == name]

    def arrivals(self, elevator_id: Optional[int] = None) -> List[int]:
        return [
            event.payload["floor"]
            for event in self.named("arrived")
            if elevator_id is None or event.payload["elevator_id"] == elevator_id
        ]


@pytest.fixture
def bus() -> EventBus:
    return EventBus(SimulatedClock())


@pytest.fixture
def recorder(bus: EventBus) -> EventRecorder:
    return EventRecorder(bus)
