from __future__ import annotations

from .interface import ElevatorSnapshot, PendingRequest, Scheduler
from .nearest_idle import NearestIdleScheduler

__all__ = [
    "ElevatorSnapshot",
    "NearestIdleScheduler",
    "PendingRequest",
    "Scheduler",
]
