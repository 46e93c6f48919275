"""HVAC engagement, energy accounting, and comfort-band checks."""
from __future__ import annotations

from app.simulation.rng import Mulberry32
from app.simulation.state import RoomState, SimulationState

HVAC_POWER_KW = 4.29  # Typical for a 5-ton unit
EFFICIENCY_VARIANCE = 0.1  # ±10% unit-to-unit
COOLING_STEP_F = 0.3  # °F removed per minute of runtime

COMFORT_MIN_F = 68.0
COMFORT_MAX_F = 74.0


def draw_efficiency_factor(rng: Mulberry32) -> float:
    """Per-run efficiency multiplier in [0.9, 1.1)."""
    return 1.0 + (rng.random() * 2 * EFFICIENCY_VARIANCE - EFFICIENCY_VARIANCE)


def effective_power_kw(efficiency_factor: float) -> float:
    return HVAC_POWER_KW * efficiency_factor


def apply_cooling(room: RoomState, state: SimulationState, power_kw: float) -> bool:
    """Cool the room for one minute if it is above target.

    Returns True when the HVAC engaged.
    """
    if room.temp <= room.target_temp:
        return False
    room.temp -= COOLING_STEP_F
    room.runtime_minutes += 1
    state.energy_used_kwh += power_kw / 60
    return True


def in_comfort_band(temp: float) -> bool:
    return COMFORT_MIN_F <= temp <= COMFORT_MAX_F


def check_comfort(room: RoomState) -> None:
    """Count a violation when the finalized temperature is outside the band."""
    if not in_comfort_band(room.temp):
        room.comfort_violations += 1
