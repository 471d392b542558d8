import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from rental_engine.api.routers.health import router as health_router
from rental_engine.api.routers.vehicles import router as vehicles_router
from rental_engine.config import get_settings
from rental_engine.domain.errors import SlotsUnavailableError

# Configure structured logging
logging.basicConfig(
    level=get_settings().log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Rental Pricing Engine",
    version="0.1.0",
)


@app.exception_handler(SlotsUnavailableError)
async def slots_unavailable_handler(request: Request, exc: SlotsUnavailableError):
    logger.warning(
        "Availability slots could not be fetched",
        extra={"path": request.url.path, "vehicle_id": exc.vehicle_id, "reason": exc.reason},
    )
    return JSONResponse(
        status_code=503,
        content={
            "code": exc.code,
            "message": "We couldn't load this vehicle's availability. Please try again shortly.",
        },
    )


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "message": "An unexpected error occurred. Please contact support with the error_id if the issue persists."
        }
    )


app.include_router(health_router, tags=["Health"])
app.include_router(vehicles_router, prefix="/api/v1", tags=["Vehicles"])
