from __future__ import annotations

from typing import List

import pytest

from simulation import Building, Elevator, RequestQueue, Simulation, SimulationConfig


def quiet_simulation(elevators: List[Elevator], num_floors: int = 10, **overrides) -> Simulation:
    """A headless simulation over the given cabins with random arrivals switched off."""
    settings = dict(
        num_floors=num_floors,
        num_requests=1000,
        elevator_count=len(elevators),
        tick_interval=0.0,
        random_seed=7,
    )
    settings.update(overrides)
    config = SimulationConfig(**settings)
    building = Building(
        num_floors=num_floors,
        elevators=elevators,
        queue=RequestQueue(config.queue_capacity),
    )
    simulation = Simulation(config, building=building)
    simulation._generate_request_arrival = lambda: None
    return simulation


@pytest.fixture
def make_quiet_simulation():
    return quiet_simulation
