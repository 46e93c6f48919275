"""HVAC control policies mapping occupancy to a target temperature."""
from __future__ import annotations

from enum import Enum

LEGACY_SETPOINT_F = 72.0
OCCUPIED_SETPOINT_F = 72.0
IDLE_SETPOINT_F = 82.0


class ControlPolicy(str, Enum):
    """Stateless setpoint policy."""
    legacy = "legacy"
    sentient = "sentient"

    @classmethod
    def from_flag(cls, is_sentient: bool) -> ControlPolicy:
        return cls.sentient if is_sentient else cls.legacy

    def target_temperature(self, occupied: bool) -> float:
        if self is ControlPolicy.sentient:
            return OCCUPIED_SETPOINT_F if occupied else IDLE_SETPOINT_F
        return LEGACY_SETPOINT_F
