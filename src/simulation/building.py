from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from scheduler import ElevatorSnapshot, NearestIdleScheduler, PendingRequest, Scheduler

from .elevator import Elevator
from .request import Request, RequestQueue

logger = logging.getLogger(__name__)


@dataclass
class Building:
    """Container for the fleet and its request queue with simple dispatch."""

    num_floors: int
    elevators: List[Elevator] = field(default_factory=list)
    queue: RequestQueue = field(default_factory=RequestQueue)
    scheduler: Scheduler = field(default_factory=NearestIdleScheduler)

    def dispatch(self) -> List[Tuple[Request, Elevator]]:
        """Match queued requests to idle elevators and hand over their targets."""
        snapshots = self._snapshot_elevators()
        pending = [
            PendingRequest(
                request_id=request.request_id,
                start_floor=request.start_floor,
                target_floor=request.target_floor,
                requested_at=request.created_at,
            )
            for request in self.queue
        ]
        assignments = self.scheduler.select_calls(snapshots, pending)
        if not assignments:
            return []

        def match(request: Request) -> Optional[Elevator]:
            elevator_id = assignments.get(request.request_id)
            if elevator_id is None:
                return None
            return self.get_elevator(elevator_id)

        matched = self.queue.drain_matching(match)
        for request, elevator in matched:
            elevator.assign_target(request.target_floor)
            logger.debug(
                "Request %d (%d -> %d) assigned to elevator %d at floor %d",
                request.request_id,
                request.start_floor,
                request.target_floor,
                elevator.elevator_id,
                elevator.current_floor,
            )
        return matched

    def move_elevators(self) -> None:
        for elevator in self.elevators:
            elevator.step()

    @property
    def idle_count(self) -> int:
        return sum(1 for elevator in self.elevators if elevator.is_available())

    @property
    def broken_count(self) -> int:
        return sum(1 for elevator in self.elevators if elevator.broken)

    def any_broken(self) -> bool:
        return any(elevator.broken for elevator in self.elevators)

    def all_at_ground(self) -> bool:
        return all(elevator.current_floor == 0 for elevator in self.elevators)

    def get_elevator(self, elevator_id: int) -> Optional[Elevator]:
        for elevator in self.elevators:
            if elevator.elevator_id == elevator_id:
                return elevator
        return None

    def _snapshot_elevators(self) -> List[ElevatorSnapshot]:
        return [
            ElevatorSnapshot(
                elevator_id=elevator.elevator_id,
                current_floor=elevator.current_floor,
                idle=elevator.idle,
                broken=elevator.broken,
            )
            for elevator in self.elevators
        ]
