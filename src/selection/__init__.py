from __future__ import annotations

from .interface import ElevatorSnapshot, SelectionStrategy
from .nearest import NearestElevatorStrategy
from .registry import StrategyRegistry, UnknownStrategyError, default_registry
from .round_robin import RoundRobinStrategy
from .types import Direction, ElevatorStatus

__all__ = [
    "Direction",
    "ElevatorSnapshot",
    "ElevatorStatus",
    "NearestElevatorStrategy",
    "RoundRobinStrategy",
    "SelectionStrategy",
    "StrategyRegistry",
    "UnknownStrategyError",
    "default_registry",
]
