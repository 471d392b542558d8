"""Política de duración mínima/máxima del slot gobernante."""

from rental_engine.domain.entities.availability_slot import AvailabilitySlot
from rental_engine.domain.entities.duration import DurationOk, DurationOutcome, DurationViolation
from rental_engine.domain.value_objects.booking_window import BookingWindow


class RentalDurationPolicy:
    """
    Aplica min_rental_hours / max_rental_hours a una ventana candidata.

    Regla de producto: el máximo sólo limita reservas del mismo día; las
    reservas de varios días sólo deben cumplir el mínimo.
    """

    def validate(
        self,
        window: BookingWindow,
        governing_slot: AvailabilitySlot,
        is_same_day: bool,
    ) -> DurationOutcome:
        hours = window.exact_hours
        if hours < governing_slot.min_rental_hours:
            return DurationViolation.below_minimum(governing_slot.min_rental_hours, hours)
        if is_same_day and hours > governing_slot.max_rental_hours:
            return DurationViolation.exceeds_same_day_maximum(governing_slot.max_rental_hours, hours)
        return DurationOk(hours=hours)
