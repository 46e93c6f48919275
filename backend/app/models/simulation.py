from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class Room(str, Enum):
    """Facility rooms, in the fixed order the engine draws occupancy."""
    therapy_a = "TherapyA"
    therapy_b = "TherapyB"
    waiting = "Waiting"
    admin = "Admin"


class WeatherProfile(str, Enum):
    """Preset selecting the baseline external temperature."""
    hot = "hot"
    cold = "cold"
    mixed = "mixed"


class SimulationConfig(BaseModel):
    """Per-run overrides merged over the engine defaults.

    ``occupancy_prob`` maps a room to 24 hourly probabilities; rooms left out
    keep their default schedule. Probabilities are not range-checked.
    """
    model_config = ConfigDict(frozen=True)

    occupancy_prob: Optional[dict[Room, list[float]]] = None
    base_external_temp: Optional[float] = None
    weather_profile: WeatherProfile = WeatherProfile.hot

    @field_validator("weather_profile", mode="before")
    @classmethod
    def _normalize_weather_profile(cls, value: Any) -> Any:
        # Unrecognized profiles fall back to hot instead of failing validation
        try:
            return WeatherProfile(value)
        except ValueError:
            return WeatherProfile.hot
