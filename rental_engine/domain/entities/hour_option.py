"""Entidad HourOption - hora seleccionable etiquetada con su slot."""

from dataclasses import dataclass

from rental_engine.domain.entities.availability_slot import AvailabilitySlot


@dataclass(frozen=True)
class HourOption:
    hour: int
    slot: AvailabilitySlot
