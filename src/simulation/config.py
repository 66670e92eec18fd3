from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError

REPAIR_FLAG_POLICIES = ("legacy", "any_broken")


@dataclass
class SimulationConfig:
    """Run-start parameters for one simulated fleet."""

    num_floors: int = 10
    num_requests: int = 1000
    interval: int = 2
    elevator_count: int = 3
    queue_capacity: int = 100
    tick_interval: float = 0.5
    repair_min: int = 10
    repair_max: int = 50
    fire_grace_period: float = 5.0
    repair_flag_policy: str = "legacy"
    random_seed: Optional[int] = None

    def validate(self) -> "SimulationConfig":
        if self.num_floors <= 0:
            raise ConfigError(f"num_floors must be positive, got {self.num_floors}")
        if self.num_requests < 0:
            raise ConfigError(f"num_requests must not be negative, got {self.num_requests}")
        if self.interval <= 0:
            raise ConfigError(f"interval must be positive, got {self.interval}")
        if self.elevator_count <= 0:
            raise ConfigError(f"elevator_count must be positive, got {self.elevator_count}")
        if self.queue_capacity <= 0:
            raise ConfigError(f"queue_capacity must be positive, got {self.queue_capacity}")
        if self.tick_interval < 0 or self.fire_grace_period < 0:
            raise ConfigError("tick_interval and fire_grace_period must not be negative")
        if not 0 < self.repair_min <= self.repair_max:
            raise ConfigError(
                f"repair range must satisfy 0 < min <= max, got [{self.repair_min}, {self.repair_max}]"
            )
        if self.repair_flag_policy not in REPAIR_FLAG_POLICIES:
            raise ConfigError(
                f"Unknown repair_flag_policy '{self.repair_flag_policy}'. "
                f"Available: {', '.join(REPAIR_FLAG_POLICIES)}"
            )
        return self
