"""Value Object BookingWindow - ventana [inicio, fin) propuesta por el cliente."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from rental_engine.domain.constants import ONE_HOUR
from rental_engine.domain.errors import InvalidWindowError


def to_utc(value: datetime) -> datetime:
    """
    Normaliza un datetime a UTC.

    Los datetimes naive se interpretan como UTC; los aware se convierten.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_instant(value: str | datetime) -> datetime:
    """Parsea un instante ISO-8601 y lo retorna en UTC."""
    if isinstance(value, datetime):
        return to_utc(value)
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except (AttributeError, TypeError, ValueError) as exc:
        raise InvalidWindowError(f"Timestamp ilegible: {value!r}") from exc
    return to_utc(parsed)


@dataclass(frozen=True)
class BookingWindow:
    """
    Value Object inmutable que representa una ventana de reserva semi-abierta.

    Transitorio: sólo existe durante la evaluación de cobertura y precio.

    Attributes:
        start: Instante de inicio (incluido), en UTC.
        end: Instante de fin (excluido), en UTC.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", to_utc(self.start))
        object.__setattr__(self, "end", to_utc(self.end))
        if self.start >= self.end:
            raise InvalidWindowError(
                f"start debe ser anterior a end: {self.start.isoformat()} >= {self.end.isoformat()}"
            )

    @property
    def duration(self) -> timedelta:
        """Retorna la duración de la ventana."""
        return self.end - self.start

    @property
    def exact_hours(self) -> float:
        """Horas exactas (sin redondeo), usadas por la política de duración."""
        return self.duration / ONE_HOUR

    @property
    def billed_hours(self) -> int:
        """
        Horas facturables.

        Regla de negocio: cualquier fracción de hora cuenta como hora completa.
        Ejemplo: 2h 10m = 3 horas.
        """
        whole, remainder = divmod(self.duration, ONE_HOUR)
        return whole + 1 if remainder else whole

    @property
    def start_date(self) -> date:
        return self.start.date()

    @property
    def end_date(self) -> date:
        return self.end.date()

    @property
    def is_same_day(self) -> bool:
        """Verifica si inicio y fin caen en la misma fecha UTC."""
        return self.start_date == self.end_date

    def overlaps(self, start: datetime, end: datetime) -> bool:
        """Verifica si el intervalo [start, end) se superpone con la ventana."""
        return start < self.end and end > self.start

    def contains(self, instant: datetime) -> bool:
        """Verifica si un instante está dentro de la ventana semi-abierta."""
        return self.start <= instant < self.end

    def __str__(self) -> str:
        return f"{self.start.isoformat()} -> {self.end.isoformat()}"

    @classmethod
    def from_iso(cls, start: str | datetime, end: str | datetime) -> "BookingWindow":
        """Factory method para crear desde strings ISO-8601."""
        return cls(start=parse_instant(start), end=parse_instant(end))

    @classmethod
    def from_hours(
        cls,
        start_date: date,
        start_hour: int,
        end_date: date,
        end_hour: int,
    ) -> "BookingWindow":
        """Factory method para crear desde la selección fecha/hora del flujo de reserva."""
        start = datetime(start_date.year, start_date.month, start_date.day, start_hour, tzinfo=timezone.utc)
        end = datetime(end_date.year, end_date.month, end_date.day, end_hour, tzinfo=timezone.utc)
        return cls(start=start, end=end)
