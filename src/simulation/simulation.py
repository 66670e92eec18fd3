from __future__ import annotations

import logging
import random
import time
from enum import Enum
from typing import Callable, Dict, List, Optional

from .building import Building
from .config import SimulationConfig
from .control import ControlChannel, ControlEvent
from .elevator import Elevator
from .errors import CapacityExceeded, SinkUnavailable
from .faults import FaultController, FireOverride
from .request import Request, RequestQueue
from .telemetry import ElevatorStatus, StatusSnapshot

logger = logging.getLogger(__name__)


class SimulationState(str, Enum):
    RUNNING = "running"
    COMPLETED = "completed"


class Simulation:
    """Fixed-interval tick driver for one fleet.

    Each ``step`` drains pending control events, then generates arrivals,
    dispatches, moves, processes repairs and reports status, in that order.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        building: Optional[Building] = None,
        channel: Optional[ControlChannel] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = (config or SimulationConfig()).validate()
        self.random = random.Random(self.config.random_seed)
        self.building = building or Building(
            num_floors=self.config.num_floors,
            elevators=[Elevator(i) for i in range(self.config.elevator_count)],
            queue=RequestQueue(self.config.queue_capacity),
        )
        self.channel = channel or ControlChannel()
        self.faults = FaultController(
            rng=self.random,
            repair_min=self.config.repair_min,
            repair_max=self.config.repair_max,
            repair_flag_policy=self.config.repair_flag_policy,
        )
        self.fire = FireOverride()
        self.state = SimulationState.RUNNING
        self.current_time: int = 0
        self.active_requests: int = 0
        self.dropped_requests: int = 0
        self.event_hooks: Dict[str, List[Callable[[object], None]]] = {}
        self._sleep = sleep
        self._next_request_id = 0

    @property
    def fire_mode(self) -> bool:
        return self.fire.active

    @property
    def completed(self) -> bool:
        return self.state is SimulationState.COMPLETED

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Step until the run completes (or ``max_ticks``). Returns ticks executed."""
        ticks = 0
        while not self.completed and (max_ticks is None or ticks < max_ticks):
            self.step()
            ticks += 1
            if not self.completed and self.config.tick_interval > 0:
                self._sleep(self.config.tick_interval)

        if self.completed and self.fire_mode and self.config.tick_interval > 0:
            self._sleep(self.config.fire_grace_period)
        return ticks

    def step(self) -> StatusSnapshot:
        if self.completed:
            return self.snapshot()

        for event in self.channel.drain():
            self.apply_control(event)

        self._generate_request_arrival()
        if not self.fire_mode:
            for request, elevator in self.building.dispatch():
                self._emit(
                    "dispatch",
                    {
                        "time": self.current_time,
                        "request_id": request.request_id,
                        "elevator_id": elevator.elevator_id,
                        "target_floor": request.target_floor,
                    },
                )

        self.building.move_elevators()

        if not self.fire_mode and self.building.any_broken():
            for elevator_id in self.faults.process_repairs(self.building):
                self._emit("repair", {"time": self.current_time, "elevator_id": elevator_id})

        if self._finished():
            self.state = SimulationState.COMPLETED

        snapshot = self.snapshot()
        self._emit("status", snapshot)
        if self.completed:
            logger.info(
                "Simulation ended due to %s after %d ticks",
                "fire response" if self.fire_mode else "completion of all requests",
                self.current_time + 1,
            )
            self._emit("completed", snapshot)
        self.current_time += 1
        return snapshot

    def on_event(self, event: str, callback: Callable[[object], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def post(self, event: ControlEvent) -> None:
        """Queue a control event for the start of the next tick."""
        self.channel.post(event)

    def apply_control(self, event: ControlEvent) -> None:
        if event is ControlEvent.BREAKDOWN:
            if self.fire_mode:
                logger.warning("Breakdown ignored: fire evacuation in progress")
                elevator_id = None
            else:
                elevator_id = self.faults.breakdown(self.building)
            self._emit("breakdown", {"time": self.current_time, "elevator_id": elevator_id})
        elif event is ControlEvent.FIRE:
            if self.fire.trigger(self.building):
                self._emit("fire", {"time": self.current_time})

    def enqueue(self, start_floor: int, target_floor: int) -> Optional[Request]:
        """Queue a trip; drops it (newest first) when the queue is full."""
        request = Request(
            request_id=self._next_request_id,
            start_floor=start_floor,
            target_floor=target_floor,
            created_at=self.current_time,
        )
        self._next_request_id += 1
        try:
            self.building.queue.enqueue(request)
        except CapacityExceeded as exc:
            self.dropped_requests += 1
            logger.warning("Dropping request %d (%d -> %d): %s", request.request_id, start_floor, target_floor, exc)
            self._emit("dropped", {"time": self.current_time, "request_id": request.request_id})
            return None
        self._emit("arrival", {"time": self.current_time, "request_id": request.request_id})
        return request

    def snapshot(self) -> StatusSnapshot:
        return StatusSnapshot(
            time_step=self.current_time,
            idle_count=self.building.idle_count,
            broken_count=self.building.broken_count,
            queue_length=len(self.building.queue),
            repair_requested=self.faults.repair_requested,
            repair_time=self.faults.repair_time,
            fire_mode=self.fire_mode,
            active_requests=self.active_requests,
            dropped_requests=self.dropped_requests,
            completed=self.completed,
            elevators=[
                ElevatorStatus(
                    elevator_id=elevator.elevator_id,
                    current_floor=elevator.current_floor,
                    target_floor=elevator.target_floor,
                    idle=elevator.idle,
                    broken=elevator.broken,
                    repair_intervals=elevator.repair_intervals,
                )
                for elevator in self.building.elevators
            ],
        )

    def _generate_request_arrival(self) -> None:
        if self.fire_mode or self.active_requests >= self.config.num_requests:
            return
        if self.random.randrange(self.config.interval) != 0:
            return
        num_floors = self.building.num_floors
        start_floor = self.random.randrange(num_floors)
        target_floor = self.random.randrange(num_floors)
        self.active_requests += 1
        self.enqueue(start_floor, target_floor)

    def _finished(self) -> bool:
        if self.fire_mode:
            return self.building.all_at_ground()
        return self.active_requests >= self.config.num_requests and len(self.building.queue) == 0

    def _emit(self, event: str, payload: object) -> None:
        for callback in self.event_hooks.get(event, []):
            try:
                callback(payload)
            except (SinkUnavailable, OSError) as exc:
                logger.warning("Observer for '%s' unavailable: %r", event, exc)
