from __future__ import annotations

import pytest

from dispatch import Elevator, Floor
from selection import Direction


class RecordingObserver:
    def __init__(self, name, calls):
        self.name = name
        self.calls = calls

    def update(self, floor_number, direction):
        self.calls.append((self.name, floor_number, direction))


def test_adding_same_elevator_id_twice_is_ignored(bus):
    floor = Floor(2)
    floor.add_elevator(Elevator(1, events=bus))
    floor.add_elevator(Elevator(1, events=bus, current_floor=4))
    floor.add_elevator(Elevator(2, events=bus))
    assert [e.elevator_id for e in floor.get_elevators()] == [1, 2]
    assert floor.get_elevators()[0].current_floor == 0


def test_observers_notified_in_registration_order():
    calls = []
    floor = Floor(3)
    first = RecordingObserver("first", calls)
    second = RecordingObserver("second", calls)
    floor.register_observer(first)
    floor.register_observer(second)
    floor.register_observer(first)

    floor.press_external_button(Direction.DOWN)

    assert calls == [("first", 3, Direction.DOWN), ("second", 3, Direction.DOWN)]


def test_press_without_observers_does_nothing():
    Floor(0).press_external_button(Direction.UP)


def test_elevators_are_only_added_through_add_elevator(bus):
    with pytest.raises(TypeError):
        Floor(1, elevators=[Elevator(1, events=bus), Elevator(1, events=bus)])
