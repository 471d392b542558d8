"""Validador de cobertura: ¿la ventana está cubierta sin huecos por los slots?"""

from typing import Iterable

from rental_engine.domain.entities.availability_slot import AvailabilitySlot
from rental_engine.domain.entities.coverage import Covered, CoverageResult, Gap
from rental_engine.domain.errors import SlotNotCoveredError
from rental_engine.domain.value_objects.booking_window import BookingWindow


def coverage_order(slot: AvailabilitySlot) -> tuple:
    """Orden por inicio ascendente; en empate, el slot más ancho primero."""
    return (slot.start, -slot.end.timestamp())


class SlotCoverageValidator:
    """
    Barrido de intervalos sobre los slots que se superponen con la ventana.

    Slots adyacentes (a.end == b.start) son contiguos: no hay hueco entre ellos.
    """

    def overlapping(self, window: BookingWindow, slots: Iterable[AvailabilitySlot]) -> list[AvailabilitySlot]:
        return [slot for slot in slots if slot.is_active and slot.overlaps(window)]

    def is_covered(self, window: BookingWindow, slots: Iterable[AvailabilitySlot]) -> CoverageResult:
        candidates = self.overlapping(window, slots)
        if not candidates:
            return Gap(at=window.start)

        if len(candidates) == 1 and candidates[0].covers_window(window):
            return Covered(slots=(candidates[0],))

        ordered = sorted(candidates, key=coverage_order)
        frontier = window.start
        for slot in ordered:
            if frontier < slot.start:
                return Gap(at=frontier)
            frontier = max(frontier, slot.end)

        if frontier < window.end:
            return Gap(at=frontier)
        return Covered(slots=tuple(ordered))

    def governing_slot(self, window: BookingWindow, coverage: Covered) -> AvailabilitySlot:
        """
        Slot que contiene el inicio de la ventana y determina tarifas y límites.

        Con varios candidatos gana el de inicio más temprano (el primero en
        orden de cobertura).
        """
        for slot in coverage.slots:
            if slot.contains(window.start):
                return slot
        raise SlotNotCoveredError(window.start)
