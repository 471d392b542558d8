"""Resultados de la política de duración de renta."""

from dataclasses import dataclass
from typing import Union

from rental_engine.domain.constants import DURATION_BOUND_MAX, DURATION_BOUND_MIN

REASON_BELOW_MINIMUM = "below minimum"
REASON_EXCEEDS_SAME_DAY_MAXIMUM = "exceeds maximum for same-day booking"


@dataclass(frozen=True)
class DurationOk:
    hours: float

    ok = True


@dataclass(frozen=True)
class DurationViolation:
    """
    La duración viola un límite del slot gobernante.

    Attributes:
        reason: Motivo legible ("below minimum" o "exceeds maximum for same-day booking").
        bound: Límite violado ("min" o "max").
        limit: Valor del límite en horas.
        hours: Duración exacta solicitada en horas.
    """

    reason: str
    bound: str
    limit: int
    hours: float

    ok = False

    @classmethod
    def below_minimum(cls, limit: int, hours: float) -> "DurationViolation":
        return cls(reason=REASON_BELOW_MINIMUM, bound=DURATION_BOUND_MIN, limit=limit, hours=hours)

    @classmethod
    def exceeds_same_day_maximum(cls, limit: int, hours: float) -> "DurationViolation":
        return cls(
            reason=REASON_EXCEEDS_SAME_DAY_MAXIMUM,
            bound=DURATION_BOUND_MAX,
            limit=limit,
            hours=hours,
        )


DurationOutcome = Union[DurationOk, DurationViolation]
