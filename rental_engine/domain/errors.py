"""Excepciones de dominio para el motor de disponibilidad y precios."""

from datetime import datetime


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Errores de Validación ===


class InvalidWindowError(DomainError):
    """Ventana de reserva inválida (fin <= inicio o timestamp ilegible)."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_WINDOW")


class InvalidSlotError(DomainError):
    """Slot de disponibilidad con datos inconsistentes."""

    def __init__(self, slot_id: str | None, message: str):
        label = slot_id or "<nuevo>"
        super().__init__(
            message=f"Slot {label} inválido: {message}",
            code="INVALID_SLOT",
        )
        self.slot_id = slot_id


class InvalidMoneyError(DomainError):
    """Monto monetario inválido."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_MONEY")


# === Errores de Colaboradores Externos ===


class SlotsUnavailableError(DomainError):
    """No fue posible obtener los slots de disponibilidad del vehículo."""

    def __init__(self, vehicle_id: str, reason: str | None = None):
        super().__init__(
            message=f"No se pudieron obtener los slots del vehículo {vehicle_id}: {reason}",
            code="SLOTS_UNAVAILABLE",
        )
        self.vehicle_id = vehicle_id
        self.reason = reason


class SlotNotCoveredError(DomainError):
    """Se pidió el slot gobernante de una ventana que no está cubierta."""

    def __init__(self, at: datetime):
        super().__init__(
            message=f"Ningún slot contiene el instante {at.isoformat()}",
            code="SLOT_NOT_COVERED",
        )
        self.at = at
