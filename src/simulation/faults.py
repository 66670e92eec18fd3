from __future__ import annotations

import logging
import random
from typing import List, Optional

from .building import Building

logger = logging.getLogger(__name__)


class FaultController:
    """Breaks random cabins on demand and counts their repairs down each tick.

    ``repair_requested`` and ``repair_time`` are the fleet-wide aggregates shown
    to status observers. With the ``legacy`` flag policy the first cabin to come
    back clears ``repair_requested`` for the whole fleet even while others are
    still broken; ``any_broken`` keeps the flag raised until every cabin is fixed.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        repair_min: int = 10,
        repair_max: int = 50,
        repair_flag_policy: str = "legacy",
    ) -> None:
        self.random = rng or random.Random()
        self.repair_min = repair_min
        self.repair_max = repair_max
        self.repair_flag_policy = repair_flag_policy
        self.repair_requested = False
        self.repair_time = 0

    def breakdown(self, building: Building) -> Optional[int]:
        """Take one random in-service cabin out of service.

        Returns the broken elevator's id, or ``None`` when no new breakdown
        occurred because every pick landed on a cabin that was already broken.
        """
        elevators = building.elevators
        chosen = None
        for _ in range(len(elevators)):
            candidate = elevators[self.random.randrange(len(elevators))]
            if not candidate.broken:
                chosen = candidate
                break

        if chosen is None:
            logger.warning("All elevators are currently broken. No new breakdown occurred.")
            return None

        chosen.break_down(self.random.randint(self.repair_min, self.repair_max))
        self.repair_requested = True
        self.repair_time = chosen.repair_intervals
        logger.warning(
            "Elevator %d broke down at floor %d, repair in %d ticks",
            chosen.elevator_id,
            chosen.current_floor,
            chosen.repair_intervals,
        )
        return chosen.elevator_id

    def process_repairs(self, building: Building) -> List[int]:
        """Advance every repair countdown by one tick. Returns the ids back in service."""
        repaired: List[int] = []
        for elevator in building.elevators:
            if not elevator.broken:
                continue
            if elevator.repair_tick():
                repaired.append(elevator.elevator_id)
                logger.info("Elevator %d repaired", elevator.elevator_id)
                if self.repair_flag_policy == "legacy":
                    self.repair_requested = False
            else:
                self.repair_time = elevator.repair_intervals
        if self.repair_flag_policy == "any_broken":
            self.repair_requested = building.any_broken()
            if not self.repair_requested:
                self.repair_time = 0
        return repaired


class FireOverride:
    """Fleet-wide evacuation mode. Once active it stays active for the run."""

    def __init__(self) -> None:
        self.active = False

    def trigger(self, building: Building) -> bool:
        """Send every cabin to the ground floor. Returns False if already active."""
        if self.active:
            logger.info("Fire alarm already active; ignoring repeated trigger")
            return False
        self.active = True
        for elevator in building.elevators:
            elevator.evacuate()
        logger.critical("Fire alarm triggered! Sending all elevators to the ground floor.")
        return True
