from __future__ import annotations

from typing import Dict, Iterable, List

from .interface import ElevatorSnapshot, PendingRequest
from .utils import nearest_elevator


class NearestIdleScheduler:
    """Sends the closest idle, in-service elevator to each request in arrival order."""

    def select_calls(
        self,
        elevator_state: Iterable[ElevatorSnapshot],
        pending_requests: Iterable[PendingRequest],
    ) -> Dict[int, int]:
        assignments: Dict[int, int] = {}
        available: List[ElevatorSnapshot] = sorted(
            (e for e in elevator_state if e.eligible), key=lambda e: e.elevator_id
        )
        for request in pending_requests:
            if not available:
                break
            candidate = nearest_elevator(available, request.start_floor)
            if candidate is None:
                continue
            assignments[request.request_id] = candidate.elevator_id
            available.remove(candidate)
        return assignments
