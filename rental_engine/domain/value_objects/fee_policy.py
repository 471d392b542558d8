"""Value Object FeePolicy - cargos fijos que se suman al monto base."""

from dataclasses import dataclass
from decimal import Decimal

from rental_engine.domain.constants import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_PLATFORM_FEE_RATE,
    DEFAULT_SECURITY_DEPOSIT,
)
from rental_engine.domain.value_objects.money import round_to_unit, to_amount


@dataclass(frozen=True)
class FeePolicy:
    """
    Configuración de cargos de una reserva.

    Attributes:
        security_deposit: Depósito fijo reembolsable.
        platform_fee_rate: Fracción del monto base cobrada por la plataforma (0.10 = 10%).
        currency_symbol: Símbolo usado en las descripciones del desglose.
    """

    security_deposit: Decimal = DEFAULT_SECURITY_DEPOSIT
    platform_fee_rate: Decimal = DEFAULT_PLATFORM_FEE_RATE
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL

    def __post_init__(self) -> None:
        object.__setattr__(self, "security_deposit", to_amount(self.security_deposit, "security_deposit"))
        object.__setattr__(self, "platform_fee_rate", to_amount(self.platform_fee_rate, "platform_fee_rate"))

    def platform_fee(self, base_amount: Decimal) -> Decimal:
        """Comisión de plataforma redondeada a la unidad monetaria entera."""
        return round_to_unit(base_amount * self.platform_fee_rate)

    @classmethod
    def from_settings(cls, settings) -> "FeePolicy":
        """Factory method para crear desde la configuración de la aplicación."""
        return cls(
            security_deposit=settings.security_deposit,
            platform_fee_rate=settings.platform_fee_rate,
            currency_symbol=settings.currency_symbol,
        )
