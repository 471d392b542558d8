"""Servicios de dominio: componentes puros y sin estado del motor."""

from rental_engine.domain.services.booking_evaluator import BookingEvaluator
from rental_engine.domain.services.coverage import SlotCoverageValidator
from rental_engine.domain.services.duration_policy import RentalDurationPolicy
from rental_engine.domain.services.hour_options import HourOptionGenerator
from rental_engine.domain.services.pricing import DynamicPriceCalculator

__all__ = [
    "BookingEvaluator",
    "DynamicPriceCalculator",
    "HourOptionGenerator",
    "RentalDurationPolicy",
    "SlotCoverageValidator",
]
