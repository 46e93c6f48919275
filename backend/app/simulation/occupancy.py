"""Stochastic room occupancy driven by hour-of-day probability tables.

Clinical treatment rooms are busiest during business hours, the waiting
area has a higher baseline, and admin is staffed over a wider window.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from app.models.simulation import Room
from app.simulation.rng import Mulberry32

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60


def _schedule(start: int, end: int, busy: float, idle: float) -> tuple[float, ...]:
    """24 hourly probabilities: ``busy`` for start <= hour < end, else ``idle``."""
    return tuple(busy if start <= h < end else idle for h in range(HOURS_PER_DAY))


DEFAULT_OCCUPANCY_PROB: Mapping[Room, tuple[float, ...]] = MappingProxyType({
    Room.therapy_a: _schedule(9, 17, 0.6, 0.1),
    Room.therapy_b: _schedule(9, 17, 0.6, 0.1),
    Room.waiting: _schedule(9, 17, 0.8, 0.2),
    Room.admin: _schedule(8, 18, 0.9, 0.1),
})


def hour_of_day(minute_of_day: int) -> int:
    return minute_of_day // MINUTES_PER_HOUR


class OccupancyModel:
    """Per-room hourly occupancy probabilities with per-room overrides.

    Overrides replace a room's whole schedule; an override shorter than 24
    entries falls back to the default probability for the missing hours.
    """

    def __init__(self, overrides: Mapping[Room, Sequence[float]] | None = None):
        merged: dict[Room, tuple[float, ...]] = dict(DEFAULT_OCCUPANCY_PROB)
        if overrides:
            for room, probs in overrides.items():
                merged[Room(room)] = tuple(probs)
        self._table: Mapping[Room, tuple[float, ...]] = MappingProxyType(merged)

    def probability(self, room: Room, hour: int) -> float:
        probs = self._table.get(room)
        if probs is not None and hour < len(probs):
            return probs[hour]
        return DEFAULT_OCCUPANCY_PROB[room][hour]

    def draw(self, room: Room, hour: int, rng: Mulberry32) -> bool:
        """Consume exactly one draw; occupied iff it falls below the probability."""
        return rng.random() < self.probability(room, hour)
