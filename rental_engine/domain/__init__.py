"""
Capa de Dominio - Motor de disponibilidad y precios de rentas.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks
ni I/O. Todos los componentes son funciones puras sobre datos inmutables.

Estructura:
- entities/: Slots, opciones de hora y resultados tipados
- value_objects/: BookingWindow, FeePolicy y helpers monetarios
- services/: Generador de horas, cobertura, duración y precio
- errors.py: Excepciones específicas del dominio
- constants.py: Constantes del dominio
"""

from rental_engine.domain.entities import (
    AvailabilitySlot,
    BookingError,
    BookingErrorKind,
    BookingEvaluation,
    Covered,
    CoverageResult,
    DurationOk,
    DurationOutcome,
    DurationViolation,
    Gap,
    HourOption,
    PriceBreakdown,
)
from rental_engine.domain.errors import (
    DomainError,
    InvalidMoneyError,
    InvalidSlotError,
    InvalidWindowError,
    SlotNotCoveredError,
    SlotsUnavailableError,
)
from rental_engine.domain.value_objects import BookingWindow, FeePolicy

__all__ = [
    # Entities
    "AvailabilitySlot",
    "HourOption",
    "Covered",
    "CoverageResult",
    "Gap",
    "DurationOk",
    "DurationOutcome",
    "DurationViolation",
    "PriceBreakdown",
    "BookingError",
    "BookingErrorKind",
    "BookingEvaluation",
    # Value Objects
    "BookingWindow",
    "FeePolicy",
    # Errors
    "DomainError",
    "InvalidWindowError",
    "InvalidSlotError",
    "InvalidMoneyError",
    "SlotNotCoveredError",
    "SlotsUnavailableError",
]
