"""Thermal model: external weather and per-room temperature drift."""
from __future__ import annotations

import math

from app.models.simulation import SimulationConfig, WeatherProfile
from app.simulation.rng import Mulberry32
from app.simulation.state import RoomState

MINUTES_PER_DAY = 24 * 60

DIURNAL_AMPLITUDE_F = 10.0
NOISE_AMPLITUDE_F = 3.0

TEMP_GAIN_PER_OCCUPANT = 0.2  # °F/min while occupied
TEMP_LOSS_UNOCCUPIED = 0.1  # °F/min while idle
LEAKAGE_COEFFICIENT = 0.01  # fraction of indoor/outdoor gap closed per idle minute

WEATHER_BASELINES_F: dict[WeatherProfile, float] = {
    WeatherProfile.hot: 90.0,
    WeatherProfile.cold: 50.0,
    WeatherProfile.mixed: 75.0,
}


def resolve_baseline(config: SimulationConfig) -> float:
    """Explicit baseline wins; otherwise the weather profile's preset."""
    if config.base_external_temp is not None:
        return config.base_external_temp
    return WEATHER_BASELINES_F[config.weather_profile]


def diurnal_temperature(baseline: float, minute_of_day: int) -> float:
    return baseline + DIURNAL_AMPLITUDE_F * math.sin(2 * math.pi * minute_of_day / MINUTES_PER_DAY)


def external_temperature(baseline: float, minute_of_day: int, rng: Mulberry32) -> float:
    """Diurnal sinusoid plus one shared ±3°F noise draw."""
    noise = rng.random() * 2 * NOISE_AMPLITUDE_F - NOISE_AMPLITUDE_F
    return diurnal_temperature(baseline, minute_of_day) + noise


def update_room_temperature(room: RoomState, external_temp: float) -> None:
    """Apply one minute of occupant gain or passive loss plus leakage."""
    if room.occupied:
        room.temp += TEMP_GAIN_PER_OCCUPANT
    else:
        room.temp -= TEMP_LOSS_UNOCCUPIED
        room.temp += (external_temp - room.temp) * LEAKAGE_COEFFICIENT
