"""Entidad PriceBreakdown - desglose de precio de una ventana validada."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class PriceBreakdown:
    """
    Desglose derivado (no persistido) del precio de una reserva.

    `breakdown` es parte del contrato: la UI y los recibos lo muestran tal cual.
    """

    base_amount: Decimal
    breakdown: str
    used_daily_rate: bool
    security_deposit: Decimal
    platform_fee: Decimal
    total: Decimal
    hours: int

    def to_payload(self) -> dict[str, Any]:
        """Serializa al formato JSON del API (montos como números)."""
        return {
            "base_amount": float(self.base_amount),
            "security_deposit": float(self.security_deposit),
            "platform_fee": float(self.platform_fee),
            "total": float(self.total),
            "hours": self.hours,
            "breakdown": self.breakdown,
            "used_daily_rate": self.used_daily_rate,
        }
