from __future__ import annotations


class SimulationError(Exception):
    """Base class for errors raised by the elevator simulation."""


class ConfigError(SimulationError, ValueError):
    """Run-start configuration is invalid."""


class CapacityExceeded(SimulationError):
    """The request queue is full and cannot accept another arrival."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Request queue is full (capacity {capacity})")
        self.capacity = capacity


class ControlDeliveryFailure(SimulationError):
    """A control event could not be delivered to a running simulation."""


class SinkUnavailable(SimulationError):
    """A status observer could not take the latest snapshot."""
