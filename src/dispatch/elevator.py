from __future__ import annotations

import heapq
import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from selection import Direction, ElevatorSnapshot, ElevatorStatus

from .config import ElevatorTimings
from .events import EventBus

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Elevator:
    """Elevator state machine with per-direction queues of pending stops.

    Up stops are kept in a min-heap and down stops in a max-heap (stored
    negated), so each direction always yields its nearest stop first. Only
    the container matching the current direction is drained: an idle
    elevator queues new stops but does not start moving until a move sets
    its direction, unless ``timings.auto_start`` is enabled.

    A trip runs from the call that started it until the queue for its
    direction is empty. While it runs, moves and door commands from outside
    are refused and new requests are only queued. Field updates happen under
    ``_lock``; the lock is released while the clock simulates travel and
    door holds.
    """

    elevator_id: int
    events: EventBus = field(default_factory=EventBus)
    timings: ElevatorTimings = field(default_factory=ElevatorTimings)
    current_floor: int = 0
    current_direction: Direction = Direction.NONE
    status: ElevatorStatus = ElevatorStatus.STOPPED
    door_open: bool = False
    _up_requests: List[int] = field(default_factory=list, init=False, repr=False)
    _down_requests: List[int] = field(default_factory=list, init=False, repr=False)
    _busy: bool = field(default=False, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    def add_internal_request(self, floor: int) -> None:
        self._add_request(floor, internal=True)

    def add_external_request(self, floor: int) -> None:
        self._add_request(floor, internal=False)

    def move_to_floor(self, floor: int) -> bool:
        """Travel to ``floor``, open the doors, then keep serving the queue.

        Returns False without touching any state if the doors are open or
        the elevator is already on its way somewhere.
        """
        with self._lock:
            if self.door_open:
                reason = "door_open"
            elif self._busy:
                reason = "busy"
            else:
                reason = None
                self._busy = True
            current = self.current_floor
        if reason is not None:
            self.events.emit(
                "move_refused",
                elevator_id=self.elevator_id,
                floor=floor,
                current_floor=current,
                reason=reason,
            )
            return False
        self._run(floor)
        return True

    def open_door(self) -> bool:
        """Open the doors of a stationary elevator, then close them again.

        Returns False if the doors were already open or a trip is running.
        """
        if not self._start_door_command("open", door_open=False):
            return False
        self._run(None, first=self._cycle_door)
        return True

    def close_door(self) -> bool:
        if not self._start_door_command("close", door_open=True):
            return False
        self._run(None, first=lambda: self._set_door(False))
        return True

    def process_next_request(self) -> None:
        with self._lock:
            if self._busy:
                # the running trip picks it up once its doors close
                return
            target = self._claim_next_stop()
        if target is None:
            self._emit_stopped()
            return
        self._run(target)

    def stop_elevator(self) -> bool:
        with self._lock:
            if self._busy:
                return False
            self._stop_locked()
        self._emit_stopped()
        return True

    def pending_up(self) -> List[int]:
        with self._lock:
            return sorted(self._up_requests)

    def pending_down(self) -> List[int]:
        with self._lock:
            return [-floor for floor in sorted(self._down_requests)]

    def snapshot(self) -> ElevatorSnapshot:
        with self._lock:
            return ElevatorSnapshot(
                elevator_id=self.elevator_id,
                current_floor=self.current_floor,
                direction=self.current_direction,
                status=self.status,
                door_open=self.door_open,
                pending_up=tuple(sorted(self._up_requests)),
                pending_down=tuple(-floor for floor in sorted(self._down_requests)),
            )

    def _add_request(self, floor: int, internal: bool) -> None:
        with self._lock:
            if floor > self.current_floor:
                heapq.heappush(self._up_requests, floor)
                queue = Direction.UP
            elif floor < self.current_floor or not internal:
                heapq.heappush(self._down_requests, -floor)
                queue = Direction.DOWN
            else:
                queue = None
        if queue is not None:
            self.events.emit(
                "request_queued",
                elevator_id=self.elevator_id,
                floor=floor,
                kind="internal" if internal else "external",
                queue=queue.value,
            )
        self.process_next_request()

    def _start_door_command(self, action: str, door_open: bool) -> bool:
        with self._lock:
            if self._busy:
                floor = self.current_floor
            elif self.door_open != door_open:
                return False
            else:
                self._busy = True
                return True
        self.events.emit(
            "door_refused",
            elevator_id=self.elevator_id,
            action=action,
            floor=floor,
            reason="busy",
        )
        return False

    def _run(self, target: Optional[int], first: Optional[Callable[[], object]] = None) -> None:
        # Caller has marked the elevator busy.
        completed = False
        try:
            if first is not None:
                first()
                with self._lock:
                    target = self._claim_next_stop()
            while target is not None:
                self._travel(target)
                self._cycle_door()
                with self._lock:
                    target = self._claim_next_stop()
            completed = True
        finally:
            if not completed:
                self._abort_trip()
        self._emit_stopped()

    def _abort_trip(self) -> None:
        with self._lock:
            self.door_open = False
            self._stop_locked()
            floor = self.current_floor
        logger.warning("Elevator %s trip aborted at floor %s", self.elevator_id, floor)

    def _travel(self, floor: int) -> None:
        with self._lock:
            origin = self.current_floor
            self.current_direction = Direction.UP if floor > origin else Direction.DOWN
            self.status = ElevatorStatus.RUNNING
            direction = self.current_direction
        self.events.emit(
            "moving",
            elevator_id=self.elevator_id,
            from_floor=origin,
            to_floor=floor,
            direction=direction.value,
        )
        self.events.clock.sleep(abs(floor - origin) * self.timings.travel_time_per_floor)
        with self._lock:
            self.current_floor = floor
        self.events.emit("arrived", elevator_id=self.elevator_id, floor=floor)

    def _cycle_door(self) -> None:
        self._set_door(True)
        self._set_door(False)

    def _set_door(self, open_: bool) -> bool:
        with self._lock:
            if self.door_open == open_:
                return False
            self.door_open = open_
            floor = self.current_floor
        if open_:
            self.events.emit("door_opened", elevator_id=self.elevator_id, floor=floor)
            self.events.clock.sleep(self.timings.door_open_time)
        else:
            self.events.emit("door_closed", elevator_id=self.elevator_id, floor=floor)
            self.events.clock.sleep(self.timings.door_close_time)
        return True

    def _claim_next_stop(self) -> Optional[int]:
        # Caller holds the lock.
        if self.current_direction is Direction.UP and self._up_requests:
            target = heapq.heappop(self._up_requests)
        elif self.current_direction is Direction.DOWN and self._down_requests:
            target = -heapq.heappop(self._down_requests)
        elif self.timings.auto_start and (self._up_requests or self._down_requests):
            target = self._pop_nearest_head()
        else:
            self._stop_locked()
            return None
        self._busy = True
        return target

    def _pop_nearest_head(self) -> int:
        if not self._down_requests:
            return heapq.heappop(self._up_requests)
        if not self._up_requests:
            return -heapq.heappop(self._down_requests)
        up_distance = abs(self._up_requests[0] - self.current_floor)
        down_distance = abs(-self._down_requests[0] - self.current_floor)
        if up_distance <= down_distance:
            return heapq.heappop(self._up_requests)
        return -heapq.heappop(self._down_requests)

    def _stop_locked(self) -> None:
        self.current_direction = Direction.NONE
        self.status = ElevatorStatus.STOPPED
        self._busy = False

    def _emit_stopped(self) -> None:
        self.events.emit("stopped", elevator_id=self.elevator_id, floor=self.current_floor)
