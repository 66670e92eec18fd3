from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Protocol


@dataclass(frozen=True)
class ElevatorSnapshot:
    """Lightweight view of an elevator for dispatch decisions."""

    elevator_id: int
    current_floor: int
    idle: bool
    broken: bool

    @property
    def eligible(self) -> bool:
        return self.idle and not self.broken


@dataclass(frozen=True)
class PendingRequest:
    """Representation of a queued trip for schedulers."""

    request_id: int
    start_floor: int
    target_floor: int
    requested_at: int


class Scheduler(Protocol):
    """Strategy interface for matching queued requests to elevators."""

    def select_calls(
        self,
        elevator_state: Iterable[ElevatorSnapshot],
        pending_requests: Iterable[PendingRequest],
    ) -> Dict[int, int]:
        """
        Return mapping of request_id -> elevator_id for this dispatch cycle.

        Requests missing from the mapping stay queued. An elevator appears
        at most once among the values.
        """
        ...
