"""Simulation primitives for the elevator fleet fault simulator."""

from .building import Building
from .config import SimulationConfig
from .control import ControlChannel, ControlEvent
from .elevator import Elevator
from .errors import (
    CapacityExceeded,
    ConfigError,
    ControlDeliveryFailure,
    SimulationError,
    SinkUnavailable,
)
from .faults import FaultController, FireOverride
from .request import Request, RequestQueue
from .simulation import Simulation, SimulationState
from .telemetry import Announcement, StatusSnapshot, announce

__all__ = [
    "Announcement",
    "Building",
    "CapacityExceeded",
    "ConfigError",
    "ControlChannel",
    "ControlDeliveryFailure",
    "ControlEvent",
    "Elevator",
    "FaultController",
    "FireOverride",
    "Request",
    "RequestQueue",
    "Simulation",
    "SimulationConfig",
    "SimulationError",
    "SimulationState",
    "SinkUnavailable",
    "StatusSnapshot",
    "announce",
]
