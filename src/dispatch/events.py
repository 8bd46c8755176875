from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .clock import Clock, SimulatedClock

logger = logging.getLogger(__name__)

WARNING_EVENTS = frozenset({"move_refused", "no_elevator_available"})


@dataclass(frozen=True)
class Event:
    name: str
    time: float
    payload: Dict[str, object] = field(default_factory=dict)

    def as_dict(self) -> dict:
        return {"event": self.name, "time": self.time, **self.payload}


class EventBus:
    """Fans simulation events out to hooks and the module logger.

    Hooks registered under ``"*"`` receive every event.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.clock: Clock = clock or SimulatedClock()
        self.event_hooks: Dict[str, List[Callable[[Event], None]]] = {}

    def on_event(self, event: str, callback: Callable[[Event], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def emit(self, event: str, **payload: object) -> Event:
        record = Event(name=event, time=self.clock.now(), payload=payload)
        level = logging.WARNING if event in WARNING_EVENTS else logging.INFO
        logger.log(level, "t=%.2f %s %s", record.time, event, payload)
        for callback in self.event_hooks.get(event, []):
            callback(record)
        for callback in self.event_hooks.get("*", []):
            callback(record)
        return record
