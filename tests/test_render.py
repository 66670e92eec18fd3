from simulation import Elevator, Simulation, SimulationConfig
from simulation.render import render_frame
from simulation.telemetry import announce


def test_frame_shows_cabins_and_fleet_counters():
    simulation = Simulation(SimulationConfig(num_floors=4, tick_interval=0.0))
    elevators = simulation.building.elevators
    elevators[0].current_floor = 3
    elevators[0].assign_target(1)
    elevators[1].break_down(12)
    simulation.faults.repair_requested = True
    simulation.faults.repair_time = 12

    lines = render_frame(simulation.snapshot(), num_floors=4).splitlines()

    assert lines[0].startswith("  3")
    assert "[ 1]" in lines[0]
    assert all("[XX]" in line for line in lines[:4])
    assert "Idle Elevators: 1 | Requests in Queue: 0" in lines
    assert "Elevators Out of Service: 1 | Repair Requested: Yes | Time to Repair: 12" in lines


def test_announcement_identifies_this_process():
    announcement = announce()
    assert announcement.pid > 0
    assert announcement.hostname
    assert '"application": "elevator_sim"' in announcement.to_json()


def test_snapshot_is_plain_data():
    simulation = Simulation(SimulationConfig(tick_interval=0.0))
    simulation.building.elevators[2] = Elevator(2, current_floor=6)

    data = simulation.snapshot().to_dict()

    assert data["elevators"][2]["current_floor"] == 6
    assert data["fire_mode"] is False
