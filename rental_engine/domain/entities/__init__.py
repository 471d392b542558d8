"""Entidades del dominio de disponibilidad y precios."""

from rental_engine.domain.entities.availability_slot import AvailabilitySlot
from rental_engine.domain.entities.booking_outcome import (
    BookingError,
    BookingErrorKind,
    BookingEvaluation,
)
from rental_engine.domain.entities.coverage import Covered, CoverageResult, Gap
from rental_engine.domain.entities.duration import DurationOk, DurationOutcome, DurationViolation
from rental_engine.domain.entities.hour_option import HourOption
from rental_engine.domain.entities.price_breakdown import PriceBreakdown

__all__ = [
    # Slots
    "AvailabilitySlot",
    "HourOption",
    # Coverage
    "Covered",
    "CoverageResult",
    "Gap",
    # Duration
    "DurationOk",
    "DurationOutcome",
    "DurationViolation",
    # Pricing
    "PriceBreakdown",
    # Outcomes
    "BookingError",
    "BookingErrorKind",
    "BookingEvaluation",
]
