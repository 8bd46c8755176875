from __future__ import annotations

import pytest

from selection import (
    Direction,
    ElevatorSnapshot,
    NearestElevatorStrategy,
    RoundRobinStrategy,
    StrategyRegistry,
    UnknownStrategyError,
    default_registry,
)


def snap(elevator_id: int, floor: int, direction: Direction = Direction.NONE) -> ElevatorSnapshot:
    return ElevatorSnapshot(elevator_id=elevator_id, current_floor=floor, direction=direction)


@pytest.fixture
def strategy() -> NearestElevatorStrategy:
    return NearestElevatorStrategy()


def test_nearest_idle_elevator_below_is_chosen_for_up_call(strategy):
    elevators = [snap(1, 0), snap(2, 5)]
    chosen = strategy.select_elevator(elevators, 2, Direction.UP)
    assert chosen.elevator_id == 1


def test_no_elevator_when_all_move_the_wrong_way(strategy):
    elevators = [snap(1, 0, Direction.DOWN), snap(2, 5, Direction.DOWN)]
    assert strategy.select_elevator(elevators, 3, Direction.UP) is None


def test_empty_fleet_selects_nothing(strategy):
    assert strategy.select_elevator([], 3, Direction.UP) is None


def test_ties_go_to_the_first_listed_elevator(strategy):
    elevators = [snap(1, 0), snap(2, 0)]
    assert strategy.select_elevator(elevators, 1, Direction.UP).elevator_id == 1
    assert strategy.select_elevator(list(reversed(elevators)), 1, Direction.UP).elevator_id == 2


def test_elevator_heading_down_from_above_beats_closer_idle_below(strategy):
    elevators = [snap(1, 2), snap(2, 7, Direction.DOWN)]
    chosen = strategy.select_elevator(elevators, 4, Direction.DOWN)
    assert chosen.elevator_id == 2


def test_up_moving_elevator_above_call_is_not_eligible(strategy):
    elevators = [snap(1, 6, Direction.UP), snap(2, 9)]
    chosen = strategy.select_elevator(elevators, 4, Direction.UP)
    # falls back to the idle elevator even though it is farther away
    assert chosen.elevator_id == 2


def test_up_moving_elevator_below_call_is_eligible(strategy):
    elevators = [snap(1, 1, Direction.UP), snap(2, 0)]
    chosen = strategy.select_elevator(elevators, 3, Direction.UP)
    assert chosen.elevator_id == 1


def test_idle_fallback_picks_nearest(strategy):
    elevators = [snap(1, 9), snap(2, 6), snap(3, 2, Direction.DOWN)]
    chosen = strategy.select_elevator(elevators, 4, Direction.UP)
    assert chosen.elevator_id == 2


def test_directionless_call_uses_idle_fallback(strategy):
    elevators = [snap(1, 8), snap(2, 3, Direction.UP), snap(3, 5)]
    chosen = strategy.select_elevator(elevators, 4, Direction.NONE)
    assert chosen.elevator_id == 3


def test_round_robin_cycles_through_elevators():
    strategy = RoundRobinStrategy()
    elevators = [snap(1, 0), snap(2, 9), snap(3, 4)]
    picks = [strategy.select_elevator(elevators, 5, Direction.UP).elevator_id for _ in range(4)]
    assert picks == [1, 2, 3, 1]
    assert strategy.select_elevator([], 5, Direction.UP) is None


def test_registry_first_registration_wins():
    registry = StrategyRegistry()
    first = NearestElevatorStrategy()
    assert registry.register("NearestElevator", first) is True
    assert registry.register("NearestElevator", RoundRobinStrategy()) is False
    assert registry.get("NearestElevator") is first
    assert registry.names() == ["NearestElevator"]


def test_registry_unknown_name_raises():
    registry = default_registry()
    with pytest.raises(UnknownStrategyError):
        registry.get("Bogus")
    with pytest.raises(ValueError):
        registry.get("nearestelevator")


def test_default_registry_is_preloaded_and_not_shared():
    registry = default_registry()
    assert "NearestElevator" in registry
    assert "RoundRobin" in registry
    assert isinstance(registry.get("NearestElevator"), NearestElevatorStrategy)
    assert default_registry().get("RoundRobin") is not registry.get("RoundRobin")
