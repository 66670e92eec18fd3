from fastapi.testclient import TestClient

from server.app import SimulationManager, create_app
from simulation import SimulationConfig


def make_client():
    manager = SimulationManager(SimulationConfig(tick_interval=0.0, random_seed=5))
    # No context manager: the background tick task stays off and tests step by hand.
    return manager, TestClient(create_app(manager))


def test_state_reports_fleet_snapshot():
    manager, client = make_client()

    response = client.get("/state")

    assert response.status_code == 200
    body = response.json()
    assert body["state"] == "running"
    assert len(body["status"]["elevators"]) == 3
    assert body["status"]["queue_length"] == 0


def test_announcement_endpoint():
    manager, client = make_client()

    body = client.get("/announcement").json()

    assert body["application"] == "elevator_sim"
    assert body["pid"] == manager.announcement.pid


def test_fire_control_is_applied_at_next_tick():
    manager, client = make_client()

    response = client.post("/control/fire")

    assert response.status_code == 202
    assert response.json() == {"event": "fire", "pending": 1, "fire_mode": False}
    manager.simulation.step()
    assert client.get("/state").json()["status"]["fire_mode"] is True


def test_unknown_control_event_is_rejected():
    manager, client = make_client()

    response = client.post("/control/flood")

    assert response.status_code == 404
    assert "Unknown control event" in response.json()["detail"]
    assert len(manager.simulation.channel) == 0
