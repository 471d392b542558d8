"""Interfaces (Puertos) de la capa de aplicación."""

from rental_engine.application.interfaces.booking_gateway import (
    BookingGateway,
    BookingPayload,
    BookingSubmissionResult,
)
from rental_engine.application.interfaces.slot_repo import SlotRepo

__all__ = [
    # Repositories
    "SlotRepo",
    # Gateways
    "BookingGateway",
    "BookingPayload",
    "BookingSubmissionResult",
]
