"""Implementaciones in-memory para desarrollo y testing."""

from rental_engine.infrastructure.in_memory.booking_gateway import StubBookingGateway
from rental_engine.infrastructure.in_memory.slot_repo import InMemorySlotRepo

__all__ = [
    "InMemorySlotRepo",
    "StubBookingGateway",
]
