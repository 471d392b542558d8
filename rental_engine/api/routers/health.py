"""
Health check endpoints for monitoring and orchestration (K8s, Docker, etc.)

The engine holds no connections of its own; the slot source is contacted lazily
by the booking endpoints, so only liveness is exposed here.
"""

from fastapi import APIRouter, Depends

from rental_engine.config import Settings, get_settings

router = APIRouter()


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    """
    Basic liveness check.

    Returns 200 OK if the application is running.
    """
    return {
        "status": "ok",
        "service": "rental-pricing-engine",
        "slot_source": "in_memory" if settings.use_in_memory else "http",
    }
