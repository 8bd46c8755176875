from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Travel direction of an elevator or a hall call. NONE means idle."""

    UP = "up"
    DOWN = "down"
    NONE = "none"


class ElevatorStatus(str, Enum):
    RUNNING = "running"
    STOPPED = "stopped"
