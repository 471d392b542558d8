"""Resultados de cobertura de una ventana de reserva."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Union

from rental_engine.domain.entities.availability_slot import AvailabilitySlot


@dataclass(frozen=True)
class Covered:
    """La ventana está cubierta sin huecos por los slots en orden de inicio."""

    slots: tuple[AvailabilitySlot, ...]

    covered = True

    @property
    def slot_ids(self) -> list[str]:
        return [slot.id for slot in self.slots if slot.id is not None]

    def to_payload(self) -> dict[str, Any]:
        return {"covered": True, "contributing_slot_ids": self.slot_ids}


@dataclass(frozen=True)
class Gap:
    """Existe un hueco de disponibilidad a partir del instante `at`."""

    at: datetime

    covered = False

    def to_payload(self) -> dict[str, Any]:
        return {"covered": False, "gap_at": self.at.isoformat()}


CoverageResult = Union[Covered, Gap]
