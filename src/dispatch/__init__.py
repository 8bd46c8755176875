"""Elevator state machine, floors and hall-call dispatch."""

from .building import Building, UnknownElevatorError, UnknownFloorError
from .clock import Clock, RealClock, SimulatedClock
from .config import ElevatorTimings
from .dispatcher import Dispatcher, HallCall
from .elevator import Elevator
from .events import Event, EventBus
from .floor import Floor
from .observers import HallCallObserver

__all__ = [
    "Building",
    "Clock",
    "Dispatcher",
    "Elevator",
    "ElevatorTimings",
    "Event",
    "EventBus",
    "Floor",
    "HallCall",
    "HallCallObserver",
    "RealClock",
    "SimulatedClock",
    "UnknownElevatorError",
    "UnknownFloorError",
]
