"""Resultados tipados de la evaluación de una reserva."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from rental_engine.domain.constants import DURATION_BOUND_MIN
from rental_engine.domain.entities.availability_slot import AvailabilitySlot
from rental_engine.domain.entities.coverage import Covered, CoverageResult, Gap
from rental_engine.domain.entities.duration import DurationViolation
from rental_engine.domain.entities.price_breakdown import PriceBreakdown
from rental_engine.domain.value_objects.booking_window import BookingWindow


class BookingErrorKind(str, Enum):
    """Tipos de resultado esperado (recuperable) de una evaluación."""

    INVALID_WINDOW = "INVALID_WINDOW"
    NO_AVAILABILITY = "NO_AVAILABILITY"
    COVERAGE_GAP = "COVERAGE_GAP"
    DURATION_VIOLATION = "DURATION_VIOLATION"
    STALE_AVAILABILITY = "STALE_AVAILABILITY"


MESSAGE_INVALID_WINDOW = "Please choose an end time that is after the start time."
MESSAGE_NO_AVAILABILITY = "This vehicle is not available for the selected time period."
MESSAGE_COVERAGE_GAP = (
    "Selected time period has gaps in availability. Please choose a continuous available period."
)
MESSAGE_BELOW_MINIMUM = "Minimum rental duration for this vehicle is {limit} hours."
MESSAGE_ABOVE_MAXIMUM = "Same-day bookings for this vehicle can last at most {limit} hours."
MESSAGE_STALE_AVAILABILITY = (
    "The vehicle's availability changed since you picked your time. "
    "Please review the updated options and try again."
)


@dataclass(frozen=True)
class BookingError:
    """
    Error esperado de una evaluación de reserva, con mensaje accionable.

    Los campos opcionales se llenan según el tipo: `gap_at` para huecos,
    `bound`/`limit` para violaciones de duración y `cause` para disponibilidad
    obsoleta (el tipo que falló al re-validar).
    """

    kind: BookingErrorKind
    message: str
    gap_at: datetime | None = None
    bound: str | None = None
    limit: int | None = None
    cause: BookingErrorKind | None = None

    @classmethod
    def invalid_window(cls) -> "BookingError":
        return cls(kind=BookingErrorKind.INVALID_WINDOW, message=MESSAGE_INVALID_WINDOW)

    @classmethod
    def from_gap(cls, window: BookingWindow, gap: Gap, any_overlap: bool) -> "BookingError":
        if not any_overlap:
            return cls(
                kind=BookingErrorKind.NO_AVAILABILITY,
                message=MESSAGE_NO_AVAILABILITY,
                gap_at=window.start,
            )
        return cls(kind=BookingErrorKind.COVERAGE_GAP, message=MESSAGE_COVERAGE_GAP, gap_at=gap.at)

    @classmethod
    def from_violation(cls, violation: DurationViolation) -> "BookingError":
        template = MESSAGE_BELOW_MINIMUM if violation.bound == DURATION_BOUND_MIN else MESSAGE_ABOVE_MAXIMUM
        return cls(
            kind=BookingErrorKind.DURATION_VIOLATION,
            message=template.format(limit=violation.limit),
            bound=violation.bound,
            limit=violation.limit,
        )

    @classmethod
    def stale(cls, cause: BookingErrorKind | None = None) -> "BookingError":
        return cls(
            kind=BookingErrorKind.STALE_AVAILABILITY,
            message=MESSAGE_STALE_AVAILABILITY,
            cause=cause,
        )

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.kind.value, "message": self.message}
        if self.gap_at is not None:
            payload["gap_at"] = self.gap_at.isoformat()
        if self.bound is not None:
            payload["bound"] = self.bound
            payload["limit"] = self.limit
        if self.cause is not None:
            payload["cause"] = self.cause.value
        return payload


@dataclass(frozen=True)
class BookingEvaluation:
    """
    Resultado completo de evaluar una ventana contra los slots de un vehículo.

    Exactamente uno de `price` o `error` está presente.
    """

    window: BookingWindow | None
    coverage: CoverageResult | None = None
    governing_slot: AvailabilitySlot | None = None
    price: PriceBreakdown | None = None
    error: BookingError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def contributing_slots(self) -> tuple[AvailabilitySlot, ...]:
        if isinstance(self.coverage, Covered):
            return self.coverage.slots
        return ()
