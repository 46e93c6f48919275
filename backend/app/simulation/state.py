"""Mutable per-run state and its snapshot clone."""
from __future__ import annotations

from dataclasses import dataclass, field

from app.models.simulation import Room

ROOMS: tuple[Room, ...] = (Room.therapy_a, Room.therapy_b, Room.waiting, Room.admin)

INITIAL_ROOM_TEMP_F = 72.0


@dataclass
class RoomState:
    """Thermal and counter state of one room for the current minute."""
    temp: float = INITIAL_ROOM_TEMP_F
    occupied: bool = False
    target_temp: float = INITIAL_ROOM_TEMP_F
    comfort_violations: int = 0
    runtime_minutes: int = 0

    def clone(self) -> RoomState:
        return RoomState(
            temp=self.temp,
            occupied=self.occupied,
            target_temp=self.target_temp,
            comfort_violations=self.comfort_violations,
            runtime_minutes=self.runtime_minutes,
        )


@dataclass
class SimulationState:
    """Facility-wide state, mutated in place once per simulated minute."""
    minute: int
    external_temp: float
    rooms: dict[Room, RoomState] = field(default_factory=dict)
    hvac_on: bool = False
    energy_used_kwh: float = 0.0

    @classmethod
    def initial(cls, external_temp: float) -> SimulationState:
        return cls(
            minute=0,
            external_temp=external_temp,
            rooms={room: RoomState() for room in ROOMS},
        )

    def snapshot(self) -> SimulationState:
        """Independent copy sharing no mutable sub-structure with ``self``."""
        return SimulationState(
            minute=self.minute,
            external_temp=self.external_temp,
            rooms={room: rs.clone() for room, rs in self.rooms.items()},
            hvac_on=self.hvac_on,
            energy_used_kwh=self.energy_used_kwh,
        )

    def total_comfort_violations(self) -> int:
        return sum(rs.comfort_violations for rs in self.rooms.values())

    def total_runtime_minutes(self) -> int:
        return sum(rs.runtime_minutes for rs in self.rooms.values())
