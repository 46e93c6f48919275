from fastapi import APIRouter

from app.simulation.engine import SIM_DAYS, TOTAL_MINUTES
from app.simulation.state import ROOMS

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "engine": {
            "sim_days": SIM_DAYS,
            "total_minutes": TOTAL_MINUTES,
            "rooms": [room.value for room in ROOMS],
        },
    }
