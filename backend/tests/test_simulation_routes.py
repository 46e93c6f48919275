"""Tests for the /api/simulations endpoints."""
from fastapi.testclient import TestClient

from app.config import settings
from app.main import app

client = TestClient(app)


def test_run_returns_summary():
    response = client.post("/api/simulations/run", json={"is_sentient": False, "seed": "api"})
    assert response.status_code == 200
    data = response.json()
    assert data["summary"]["seed"] == "api"
    assert data["summary"]["policy"] == "legacy"
    assert data["summary"]["energy_used_kwh"] > 0
    assert data["daily"] is None
    assert data["config"]["weather_profile"] == "hot"


def test_run_with_daily_and_config():
    response = client.post("/api/simulations/run", json={
        "is_sentient": True,
        "seed": "api",
        "include_daily": True,
        "config": {"weather_profile": "monsoon", "occupancy_prob": {"Admin": [0.5] * 24}},
    })
    assert response.status_code == 200
    data = response.json()
    assert data["config"]["weather_profile"] == "hot"
    assert len(data["daily"]) == 30
    assert data["daily"][0]["day"] == 0


def test_run_rejects_unknown_room():
    response = client.post("/api/simulations/run", json={
        "is_sentient": True,
        "config": {"occupancy_prob": {"Lobby": [0.5] * 24}},
    })
    assert response.status_code == 422


def test_compare_returns_both_policies():
    response = client.post("/api/simulations/compare", json={"seed": "cli"})
    assert response.status_code == 200
    data = response.json()
    assert data["legacy"]["policy"] == "legacy"
    assert data["sentient"]["policy"] == "sentient"
    assert data["energy_saved_kwh"] > 0


def test_monte_carlo_returns_stats():
    response = client.post("/api/simulations/monte-carlo", json={"n": 2, "seed": "api"})
    assert response.status_code == 200
    data = response.json()
    assert data["n_runs"] == 2
    assert [r["seed"] for r in data["runs"]] == ["api-0", "api-1"]
    assert data["stdev_energy_kwh"] >= 0


def test_monte_carlo_zero_runs_returns_422():
    response = client.post("/api/simulations/monte-carlo", json={"n": 0})
    assert response.status_code == 422


def test_monte_carlo_over_limit_returns_422():
    response = client.post("/api/simulations/monte-carlo", json={"n": settings.MC_MAX_RUNS + 1})
    assert response.status_code == 422


def test_compare_keeps_empty_seed():
    response = client.post("/api/simulations/compare", json={"seed": ""})
    assert response.status_code == 200
    assert response.json()["seed"] == ""


def test_run_daily_includes_room_temperatures():
    response = client.post("/api/simulations/run", json={
        "is_sentient": False, "seed": "api", "include_daily": True,
    })
    day = response.json()["daily"][0]
    assert set(day["mean_temp_by_room"]) == {"TherapyA", "TherapyB", "Waiting", "Admin"}
