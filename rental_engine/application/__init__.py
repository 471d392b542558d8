"""
Capa de Aplicación - Motor de reservas.

Esta capa contiene los casos de uso e interfaces (puertos).
Orquesta el dominio puro y define los contratos con la infraestructura.

Estructura:
- use_cases/: Opciones de hora, cotización, cobertura y envío de reservas
- interfaces/: Puertos (contratos para adaptadores)
"""

from rental_engine.application.interfaces import (
    BookingGateway,
    BookingPayload,
    BookingSubmissionResult,
    SlotRepo,
)

__all__ = [
    # Interfaces - Repositories
    "SlotRepo",
    # Interfaces - Gateways
    "BookingGateway",
    "BookingPayload",
    "BookingSubmissionResult",
]
