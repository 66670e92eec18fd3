from __future__ import annotations

import json
import os
import socket
from dataclasses import asdict, dataclass, field
from typing import List, Optional

APP_NAME = "elevator_sim"


@dataclass(frozen=True)
class ElevatorStatus:
    elevator_id: int
    current_floor: int
    target_floor: Optional[int]
    idle: bool
    broken: bool
    repair_intervals: int


@dataclass(frozen=True)
class StatusSnapshot:
    """Read-only view of the fleet handed to renderers and publishers each tick."""

    time_step: int
    idle_count: int
    broken_count: int
    queue_length: int
    repair_requested: bool
    repair_time: int
    fire_mode: bool
    active_requests: int
    dropped_requests: int
    completed: bool
    elevators: List[ElevatorStatus] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Announcement:
    """Startup record that lets a control utility locate this run."""

    pid: int
    hostname: str
    application: str = APP_NAME

    def to_json(self) -> str:
        return json.dumps(asdict(self))


def system_hostname() -> str:
    try:
        return socket.gethostname() or "unknown"
    except OSError:
        return "unknown"


def announce(application: str = APP_NAME) -> Announcement:
    return Announcement(pid=os.getpid(), hostname=system_hostname(), application=application)
