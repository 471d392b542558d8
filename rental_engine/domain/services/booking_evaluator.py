"""Orquestación pura de cobertura, duración y precio para una ventana."""

from typing import Sequence

from rental_engine.domain.entities.availability_slot import AvailabilitySlot
from rental_engine.domain.entities.booking_outcome import BookingError, BookingEvaluation
from rental_engine.domain.entities.coverage import Gap
from rental_engine.domain.entities.duration import DurationViolation
from rental_engine.domain.services.coverage import SlotCoverageValidator
from rental_engine.domain.services.duration_policy import RentalDurationPolicy
from rental_engine.domain.services.pricing import DynamicPriceCalculator
from rental_engine.domain.value_objects.booking_window import BookingWindow
from rental_engine.domain.value_objects.fee_policy import FeePolicy


class BookingEvaluator:
    """
    Evalúa una ventana contra los slots de un vehículo.

    Nunca lanza excepciones para resultados esperados: huecos, falta de
    disponibilidad y violaciones de duración vuelven como BookingError.
    Una ventana sólo se cotiza si la cobertura es completa.
    """

    def __init__(
        self,
        coverage_validator: SlotCoverageValidator | None = None,
        duration_policy: RentalDurationPolicy | None = None,
        price_calculator: DynamicPriceCalculator | None = None,
    ) -> None:
        self._coverage_validator = coverage_validator or SlotCoverageValidator()
        self._duration_policy = duration_policy or RentalDurationPolicy()
        self._price_calculator = price_calculator or DynamicPriceCalculator()

    def evaluate(
        self,
        window: BookingWindow,
        slots: Sequence[AvailabilitySlot],
        fee_policy: FeePolicy,
        is_same_day: bool | None = None,
    ) -> BookingEvaluation:
        """
        Args:
            window: Ventana ya validada (inicio < fin).
            slots: Slots del vehículo; los inactivos se ignoran.
            fee_policy: Cargos a sumar al monto base.
            is_same_day: Elección explícita del flujo de reserva. Si es None se
                deriva de las fechas UTC de la ventana.
        """
        coverage = self._coverage_validator.is_covered(window, slots)
        if isinstance(coverage, Gap):
            any_overlap = bool(self._coverage_validator.overlapping(window, slots))
            return BookingEvaluation(
                window=window,
                coverage=coverage,
                error=BookingError.from_gap(window, coverage, any_overlap),
            )

        governing_slot = self._coverage_validator.governing_slot(window, coverage)
        same_day = window.is_same_day if is_same_day is None else is_same_day
        outcome = self._duration_policy.validate(window, governing_slot, same_day)
        if isinstance(outcome, DurationViolation):
            return BookingEvaluation(
                window=window,
                coverage=coverage,
                governing_slot=governing_slot,
                error=BookingError.from_violation(outcome),
            )

        return BookingEvaluation(
            window=window,
            coverage=coverage,
            governing_slot=governing_slot,
            price=self._price_calculator.price(window, governing_slot, fee_policy),
        )
