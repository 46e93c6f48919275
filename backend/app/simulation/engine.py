"""Minute-step facility simulation.

Steps a fixed 30-day horizon one minute at a time. Each minute updates the
shared external temperature, then every room in fixed order: occupancy draw,
thermal drift, policy setpoint, cooling, comfort check. The run is fully
determined by (is_sentient, seed, config).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from app.models.simulation import SimulationConfig
from app.simulation.hvac import apply_cooling, check_comfort, draw_efficiency_factor, effective_power_kw
from app.simulation.occupancy import OccupancyModel, hour_of_day
from app.simulation.policy import ControlPolicy
from app.simulation.rng import create_rng
from app.simulation.state import ROOMS, SimulationState
from app.simulation.thermal import MINUTES_PER_DAY, external_temperature, resolve_baseline, update_room_temperature

logger = logging.getLogger(__name__)

SIM_DAYS = 30
TOTAL_MINUTES = SIM_DAYS * MINUTES_PER_DAY

DEFAULT_SEED = "seed"


@dataclass(frozen=True)
class SimulationResult:
    """Summary of one completed run, with the per-minute trace if requested."""
    energy_used_kwh: float
    comfort_violations: int
    runtime_minutes: int
    seed: str
    trace: Optional[tuple[SimulationState, ...]] = None


def simulate(
    is_sentient: bool,
    seed: str = DEFAULT_SEED,
    config: SimulationConfig | None = None,
    trace: bool = False,
) -> SimulationResult:
    """Run one full-horizon simulation.

    Args:
        is_sentient: Occupancy-aware setpoints when True, fixed setpoint otherwise.
        seed: Seed string for the run's private random stream.
        config: Occupancy / weather overrides; engine defaults when None.
        trace: Record an independent snapshot of the state after every minute.

    Returns:
        SimulationResult with facility totals; ``trace`` holds exactly
        TOTAL_MINUTES snapshots in minute order when requested, else None.
    """
    config = config or SimulationConfig()
    policy = ControlPolicy.from_flag(is_sentient)
    rng = create_rng(seed)
    occupancy = OccupancyModel(config.occupancy_prob)
    baseline = resolve_baseline(config)

    # Drawn once, before the first minute
    power_kw = effective_power_kw(draw_efficiency_factor(rng))

    logger.debug(
        "Simulating %s policy, seed=%r, baseline=%.1fF, power=%.3fkW",
        policy.value, seed, baseline, power_kw,
    )

    state = SimulationState.initial(external_temp=baseline)
    snapshots: list[SimulationState] = []

    for minute in range(TOTAL_MINUTES):
        minute_of_day = minute % MINUTES_PER_DAY
        hour = hour_of_day(minute_of_day)
        state.minute = minute
        state.external_temp = external_temperature(baseline, minute_of_day, rng)

        for room in ROOMS:
            room_state = state.rooms[room]
            room_state.occupied = occupancy.draw(room, hour, rng)
            update_room_temperature(room_state, state.external_temp)
            room_state.target_temp = policy.target_temperature(room_state.occupied)
            apply_cooling(room_state, state, power_kw)
            check_comfort(room_state)

        if trace:
            snapshots.append(state.snapshot())

    result = SimulationResult(
        energy_used_kwh=state.energy_used_kwh,
        comfort_violations=state.total_comfort_violations(),
        runtime_minutes=state.total_runtime_minutes(),
        seed=seed,
        trace=tuple(snapshots) if trace else None,
    )
    logger.debug(
        "Finished seed=%r: %.2f kWh, %d runtime min, %d violations",
        seed, result.energy_used_kwh, result.runtime_minutes, result.comfort_violations,
    )
    return result
