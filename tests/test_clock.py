from __future__ import annotations

import pytest

from dispatch import Elevator, ElevatorTimings, EventBus, RealClock, SimulatedClock


def test_simulated_clock_advances_only_forward():
    clock = SimulatedClock(start=1.0)
    clock.advance(2.5)
    clock.advance(-4)
    clock.sleep(0)
    assert clock.now() == pytest.approx(3.5)


def test_real_clock_blocks_for_the_duration():
    clock = RealClock()
    before = clock.now()
    clock.sleep(0.02)
    assert clock.now() - before >= 0.02
    clock.sleep(-1)


def test_elevator_on_real_clock_waits_for_travel():
    clock = RealClock()
    timings = ElevatorTimings(travel_time_per_floor=0.01, door_open_time=0.0, door_close_time=0.0)
    elevator = Elevator(1, events=EventBus(clock), timings=timings)
    before = clock.now()

    elevator.move_to_floor(3)

    assert clock.now() - before >= 0.03
    assert elevator.current_floor == 3
