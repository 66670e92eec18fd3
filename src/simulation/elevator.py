from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Elevator:
    """One cabin's motion and fault state."""

    elevator_id: int
    current_floor: int = 0
    target_floor: Optional[int] = None  # None while idle
    idle: bool = True
    broken: bool = False
    repair_intervals: int = 0

    def is_available(self) -> bool:
        return self.idle and not self.broken

    @property
    def moving(self) -> bool:
        return not self.idle and not self.broken

    def assign_target(self, floor: int) -> None:
        self.target_floor = floor
        self.idle = False

    def step(self) -> None:
        """Advance one floor toward the target, or settle to idle on arrival."""
        if not self.moving:
            return
        if self.target_floor is None or self.current_floor == self.target_floor:
            self.idle = True
            self.target_floor = None
        elif self.current_floor < self.target_floor:
            self.current_floor += 1
        else:
            self.current_floor -= 1

    def break_down(self, repair_intervals: int) -> None:
        self.broken = True
        self.repair_intervals = repair_intervals

    def repair_tick(self) -> bool:
        """Count down one repair tick. Returns True once the cabin is back in service."""
        if not self.broken:
            return False
        if self.repair_intervals > 0:
            self.repair_intervals -= 1
        if self.repair_intervals <= 0:
            self.broken = False
            self.repair_intervals = 0
            return True
        return False

    def evacuate(self) -> None:
        self.target_floor = 0
        self.idle = False
        self.broken = False
        self.repair_intervals = 0
