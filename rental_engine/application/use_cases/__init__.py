"""Casos de uso del motor de reservas."""

from rental_engine.application.use_cases.list_hour_options import ListHourOptionsUseCase
from rental_engine.application.use_cases.quote_booking import CheckCoverageUseCase, QuoteBookingUseCase
from rental_engine.application.use_cases.submit_booking import SubmitBookingOutcome, SubmitBookingUseCase

__all__ = [
    "CheckCoverageUseCase",
    "ListHourOptionsUseCase",
    "QuoteBookingUseCase",
    "SubmitBookingOutcome",
    "SubmitBookingUseCase",
]
