"""Simulation engine: RNG, occupancy, thermal, control, HVAC, and Monte Carlo."""
from app.simulation.errors import InvalidArgumentError
from app.simulation.rng import Mulberry32, create_rng, hash_seed
from app.simulation.occupancy import DEFAULT_OCCUPANCY_PROB, OccupancyModel
from app.simulation.policy import ControlPolicy
from app.simulation.state import ROOMS, RoomState, SimulationState
from app.simulation.engine import TOTAL_MINUTES, SimulationResult, simulate
from app.simulation.monte_carlo import MonteCarloResult, run_monte_carlo

__all__ = [
    "InvalidArgumentError",
    "Mulberry32",
    "create_rng",
    "hash_seed",
    "DEFAULT_OCCUPANCY_PROB",
    "OccupancyModel",
    "ControlPolicy",
    "ROOMS",
    "RoomState",
    "SimulationState",
    "TOTAL_MINUTES",
    "SimulationResult",
    "simulate",
    "MonteCarloResult",
    "run_monte_carlo",
]
