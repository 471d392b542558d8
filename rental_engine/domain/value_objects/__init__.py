"""Value Objects del dominio de disponibilidad y precios."""

from rental_engine.domain.value_objects.booking_window import BookingWindow, parse_instant, to_utc
from rental_engine.domain.value_objects.fee_policy import FeePolicy
from rental_engine.domain.value_objects.money import format_amount, round_to_unit, to_amount

__all__ = [
    "BookingWindow",
    "FeePolicy",
    "parse_instant",
    "to_utc",
    "format_amount",
    "round_to_unit",
    "to_amount",
]
