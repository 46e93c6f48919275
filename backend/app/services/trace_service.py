"""Trace flattening and daily rollups.

Consumes only the trace shape: snapshots ordered by minute, each carrying
the full per-room state.
"""
from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from app.models.report import DailyRollup
from app.models.simulation import Room
from app.simulation.state import ROOMS, SimulationState
from app.simulation.thermal import MINUTES_PER_DAY

ROOM_ROW_COLUMNS = [
    "minute", "room", "temp", "occupied", "target_temp",
    "comfort_violations", "runtime_minutes",
]


def trace_to_frame(trace: Sequence[SimulationState]) -> pd.DataFrame:
    """One row per (minute, room), rooms in engine order."""
    rows = []
    for snap in trace:
        for room in ROOMS:
            rs = snap.rooms[room]
            rows.append((
                snap.minute, room.value, rs.temp, rs.occupied, rs.target_temp,
                rs.comfort_violations, rs.runtime_minutes,
            ))
    return pd.DataFrame(rows, columns=ROOM_ROW_COLUMNS)


def _minute_frame(trace: Sequence[SimulationState]) -> pd.DataFrame:
    return pd.DataFrame({
        "minute": [s.minute for s in trace],
        "external_temp": [s.external_temp for s in trace],
        "energy_used_kwh": [s.energy_used_kwh for s in trace],
        "runtime_minutes": [s.total_runtime_minutes() for s in trace],
        "comfort_violations": [s.total_comfort_violations() for s in trace],
        "occupied_rooms": [sum(rs.occupied for rs in s.rooms.values()) for s in trace],
    })


def mean_temp_column(room: Room) -> str:
    return f"mean_temp_{room.value}"


def daily_room_temperatures(trace: Sequence[SimulationState]) -> pd.DataFrame:
    """Mean temperature per day for each room, one ``mean_temp_<Room>`` column per room."""
    frame = trace_to_frame(trace)
    frame["day"] = frame["minute"] // MINUTES_PER_DAY
    means = frame.groupby(["day", "room"], sort=True)["temp"].mean().unstack("room")
    means = means[[room.value for room in ROOMS]]
    means.columns = [mean_temp_column(room) for room in ROOMS]
    return means


def daily_rollup(trace: Sequence[SimulationState]) -> pd.DataFrame:
    """Per-day energy, runtime, and violations consumed/added that day.

    Counters in the trace are cumulative, so each day's figure is the
    difference between consecutive end-of-day values. Room temperatures are
    plain daily means.
    """
    columns = [
        "day", "energy_kwh", "runtime_minutes", "comfort_violations",
        "occupied_fraction", "mean_external_temp",
    ] + [mean_temp_column(room) for room in ROOMS]
    if not trace:
        return pd.DataFrame(columns=columns)

    df = _minute_frame(trace)
    df["day"] = df["minute"] // MINUTES_PER_DAY
    grouped = df.groupby("day", sort=True)

    end_of_day = grouped[["energy_used_kwh", "runtime_minutes", "comfort_violations"]].last()
    per_day = end_of_day.diff()
    per_day.iloc[0] = end_of_day.iloc[0]

    minutes_per_day = grouped["minute"].count()
    out = pd.DataFrame({
        "energy_kwh": per_day["energy_used_kwh"],
        "runtime_minutes": per_day["runtime_minutes"].astype(int),
        "comfort_violations": per_day["comfort_violations"].astype(int),
        "occupied_fraction": grouped["occupied_rooms"].sum() / (minutes_per_day * len(ROOMS)),
        "mean_external_temp": grouped["external_temp"].mean(),
    })
    out = out.join(daily_room_temperatures(trace))
    out.index.name = "day"
    return out.reset_index()[columns]


def daily_rollup_records(trace: Sequence[SimulationState]) -> list[DailyRollup]:
    df = daily_rollup(trace)
    return [
        DailyRollup(
            day=int(row["day"]),
            energy_kwh=round(float(row["energy_kwh"]), 4),
            runtime_minutes=int(row["runtime_minutes"]),
            comfort_violations=int(row["comfort_violations"]),
            occupied_fraction=round(float(row["occupied_fraction"]), 6),
            mean_external_temp=round(float(row["mean_external_temp"]), 4),
            mean_temp_by_room={
                room: round(float(row[mean_temp_column(room)]), 4) for room in ROOMS
            },
        )
        for row in df.to_dict("records")
    ]
