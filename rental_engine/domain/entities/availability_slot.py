"""Entidad AvailabilitySlot - intervalo en el que un vehículo puede rentarse."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from rental_engine.domain.errors import DomainError, InvalidSlotError
from rental_engine.domain.value_objects.booking_window import BookingWindow, parse_instant, to_utc
from rental_engine.domain.value_objects.money import to_amount


def _whole_hours(value: Any, field: str) -> int:
    """Convierte un límite de horas a int sin truncar fracciones (2.5 es inválido)."""
    if isinstance(value, bool):
        raise TypeError(f"{field} debe ser entero: {value!r}")
    try:
        hours = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"{field} debe ser entero: {value!r}") from exc
    if not hours.is_finite() or hours != hours.to_integral_value():
        raise ValueError(f"{field} debe ser entero: {value!r}")
    return int(hours)


@dataclass(frozen=True)
class AvailabilitySlot:
    """
    Entidad que representa un slot de disponibilidad publicado por el dueño.

    Intervalo semi-abierto [start, end) con un único régimen de tarifas y límites.
    Es de sólo lectura para el motor: nunca se modifica durante una evaluación.
    """

    start: datetime
    end: datetime
    hourly_rate: Decimal
    min_rental_hours: int
    max_rental_hours: int
    daily_rate: Decimal | None = None
    is_active: bool = True
    id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", to_utc(self.start))
        object.__setattr__(self, "end", to_utc(self.end))

        if self.start >= self.end:
            raise InvalidSlotError(self.id, "start debe ser anterior a end")

        try:
            object.__setattr__(self, "hourly_rate", to_amount(self.hourly_rate, "hourly_rate"))
            if self.daily_rate is not None:
                object.__setattr__(self, "daily_rate", to_amount(self.daily_rate, "daily_rate"))
        except DomainError as exc:
            raise InvalidSlotError(self.id, exc.message) from exc

        if self.min_rental_hours < 1:
            raise InvalidSlotError(self.id, f"min_rental_hours debe ser positivo: {self.min_rental_hours}")
        if self.min_rental_hours > self.max_rental_hours:
            raise InvalidSlotError(
                self.id,
                f"min_rental_hours ({self.min_rental_hours}) excede max_rental_hours ({self.max_rental_hours})",
            )

    # === Propiedades ===

    @property
    def has_daily_rate(self) -> bool:
        """
        Verifica si el slot ofrece tarifa diaria.

        Una tarifa diaria en cero se trata como ausente.
        """
        return bool(self.daily_rate)

    @property
    def start_date(self) -> date:
        return self.start.date()

    @property
    def end_date(self) -> date:
        return self.end.date()

    # === Consultas ===

    def contains(self, instant: datetime) -> bool:
        """Verifica si un instante está dentro del slot semi-abierto."""
        return self.start <= instant < self.end

    def overlaps(self, window: BookingWindow) -> bool:
        """Verifica si el slot se superpone con la ventana de reserva."""
        return window.overlaps(self.start, self.end)

    def covers_window(self, window: BookingWindow) -> bool:
        """Verifica si el slot contiene la ventana completa."""
        return self.start <= window.start and window.end <= self.end

    def covers_date(self, day: date) -> bool:
        """Verifica si la fecha cae dentro del rango de fechas del slot (inclusivo)."""
        return self.start_date <= day <= self.end_date

    # === Serialización ===

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "AvailabilitySlot":
        """Crea un slot desde el formato JSON del API de reservas."""
        slot_id = data.get("id")
        try:
            start = parse_instant(data["start_datetime"])
            end = parse_instant(data["end_datetime"])
            hourly_rate = data["hourly_rate"]
            min_hours = _whole_hours(data["min_rental_hours"], "min_rental_hours")
            max_hours = _whole_hours(data["max_rental_hours"], "max_rental_hours")
            is_active = data.get("is_active", True)
            if not isinstance(is_active, bool):
                raise TypeError(f"is_active debe ser booleano: {is_active!r}")
        except KeyError as exc:
            raise InvalidSlotError(slot_id, f"falta el campo {exc.args[0]}") from exc
        except (TypeError, ValueError) as exc:
            raise InvalidSlotError(slot_id, str(exc)) from exc
        except DomainError as exc:
            raise InvalidSlotError(slot_id, exc.message) from exc

        return cls(
            id=str(slot_id) if slot_id is not None else None,
            start=start,
            end=end,
            hourly_rate=hourly_rate,
            daily_rate=data.get("daily_rate"),
            min_rental_hours=min_hours,
            max_rental_hours=max_hours,
            is_active=is_active,
        )

    def to_payload(self) -> dict[str, Any]:
        """Serializa el slot al formato JSON del API de reservas."""
        return {
            "id": self.id,
            "start_datetime": self.start.isoformat(),
            "end_datetime": self.end.isoformat(),
            "hourly_rate": float(self.hourly_rate),
            "daily_rate": float(self.daily_rate) if self.daily_rate is not None else None,
            "min_rental_hours": self.min_rental_hours,
            "max_rental_hours": self.max_rental_hours,
            "is_active": self.is_active,
        }
