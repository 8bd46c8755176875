from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ElevatorTimings:
    """Simulated durations used by the elevator state machine."""

    travel_time_per_floor: float = 1.0
    door_open_time: float = 0.5
    door_close_time: float = 0.2
    # Let an idle elevator head for its nearest queued stop on its own.
    auto_start: bool = False
