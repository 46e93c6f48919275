from typing import Optional

from pydantic import BaseModel

from app.models.simulation import Room, SimulationConfig


class RunSummary(BaseModel):
    """Facility totals for a single simulation run."""
    seed: str
    policy: str
    energy_used_kwh: float
    comfort_violations: int
    runtime_minutes: int


class DailyRollup(BaseModel):
    """One simulated day aggregated across rooms."""
    day: int
    energy_kwh: float
    runtime_minutes: int
    comfort_violations: int
    occupied_fraction: float
    mean_external_temp: float
    mean_temp_by_room: dict[Room, float]


class SimulationRunResult(BaseModel):
    """Single run summary with optional per-day breakdown."""
    summary: RunSummary
    config: SimulationConfig
    daily: Optional[list[DailyRollup]] = None


class PolicyComparison(BaseModel):
    """Legacy vs sentient outcome under identical seed and config."""
    seed: str
    legacy: RunSummary
    sentient: RunSummary
    energy_saved_kwh: float
    energy_reduction_pct: float
    runtime_reduction_pct: float
    comfort_incidents_avoided: int


class MonteCarloSummary(BaseModel):
    """Energy distribution statistics over repeated seeded runs."""
    n_runs: int
    base_seed: str
    policy: str
    mean_energy_kwh: float
    median_energy_kwh: float
    stdev_energy_kwh: float
    runs: list[RunSummary]
