from __future__ import annotations

from typing import Iterable, Optional

from .interface import ElevatorSnapshot


def floor_distance(elevator: ElevatorSnapshot, floor: int) -> int:
    """Number of floors between an elevator and a floor."""

    return abs(elevator.current_floor - floor)


def nearest_elevator(elevators: Iterable[ElevatorSnapshot], floor: int) -> Optional[ElevatorSnapshot]:
    """Closest elevator to ``floor``; the first one scanned wins a tie."""

    nearest: Optional[ElevatorSnapshot] = None
    nearest_distance = 0
    for elevator in elevators:
        distance = floor_distance(elevator, floor)
        if nearest is None or distance < nearest_distance:
            nearest = elevator
            nearest_distance = distance
    return nearest
