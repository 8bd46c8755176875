from __future__ import annotations

from typing import Dict, List

from .interface import SelectionStrategy
from .nearest import NearestElevatorStrategy
from .round_robin import RoundRobinStrategy


class UnknownStrategyError(ValueError):
    """Raised when a strategy name is not registered."""


class StrategyRegistry:
    """Name-keyed collection of selection strategies.

    The first registration of a name wins; later ones are ignored.
    """

    def __init__(self) -> None:
        self._strategies: Dict[str, SelectionStrategy] = {}

    def register(self, name: str, strategy: SelectionStrategy) -> bool:
        if name in self._strategies:
            return False
        self._strategies[name] = strategy
        return True

    def get(self, name: str) -> SelectionStrategy:
        strategy = self._strategies.get(name)
        if strategy is None:
            raise UnknownStrategyError(f"Unknown strategy '{name}'. Available: {', '.join(self._strategies)}")
        return strategy

    def names(self) -> List[str]:
        return list(self._strategies)

    def __contains__(self, name: object) -> bool:
        return name in self._strategies


def default_registry() -> StrategyRegistry:
    registry = StrategyRegistry()
    registry.register("NearestElevator", NearestElevatorStrategy())
    registry.register("RoundRobin", RoundRobinStrategy())
    return registry
