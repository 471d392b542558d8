"""Calculador de precio dinámico: combinación de tarifa diaria y por hora."""

from decimal import Decimal

from rental_engine.domain.constants import HOURS_PER_DAY
from rental_engine.domain.entities.availability_slot import AvailabilitySlot
from rental_engine.domain.entities.price_breakdown import PriceBreakdown
from rental_engine.domain.value_objects.booking_window import BookingWindow
from rental_engine.domain.value_objects.fee_policy import FeePolicy
from rental_engine.domain.value_objects.money import format_amount


def _hours_label(hours: int, rate: Decimal, symbol: str) -> str:
    return f"{hours}h × {symbol}{format_amount(rate)}"


def _days_label(days: int, rate: Decimal, symbol: str) -> str:
    return f"{days} days × {symbol}{format_amount(rate)}"


class DynamicPriceCalculator:
    """
    Calcula el monto base de menor costo y le suma depósito y comisión.

    Las horas facturables se redondean hacia arriba (ver BookingWindow.billed_hours).
    El orden de las ramas es la política de minimización de costo:

    1. Sin tarifa diaria: sólo por hora.
    2. Menos de 24h: por hora, salvo que supere la tarifa diaria.
    3. 24h o más: días completos + resto por hora, salvo que el resto supere
       la tarifa diaria, en cuyo caso el resto cuenta como un día más.
    """

    def price(
        self,
        window: BookingWindow,
        slot: AvailabilitySlot,
        fee_policy: FeePolicy | None = None,
    ) -> PriceBreakdown:
        fee_policy = fee_policy or FeePolicy()
        hours = window.billed_hours
        base_amount, breakdown, used_daily = self.base_amount(hours, slot, fee_policy.currency_symbol)

        security_deposit = fee_policy.security_deposit
        platform_fee = fee_policy.platform_fee(base_amount)
        return PriceBreakdown(
            base_amount=base_amount,
            breakdown=breakdown,
            used_daily_rate=used_daily,
            security_deposit=security_deposit,
            platform_fee=platform_fee,
            total=base_amount + security_deposit + platform_fee,
            hours=hours,
        )

    def base_amount(self, hours: int, slot: AvailabilitySlot, symbol: str) -> tuple[Decimal, str, bool]:
        """Retorna (monto base, descripción, usó tarifa diaria)."""
        hourly_rate = slot.hourly_rate

        if not slot.has_daily_rate:
            return hourly_rate * hours, _hours_label(hours, hourly_rate, symbol), False

        daily_rate = slot.daily_rate
        if hours < HOURS_PER_DAY:
            hourly_cost = hourly_rate * hours
            if hourly_cost > daily_rate:
                return (
                    daily_rate,
                    f"Daily rate (better than {_hours_label(hours, hourly_rate, symbol)})",
                    True,
                )
            return hourly_cost, _hours_label(hours, hourly_rate, symbol), False

        full_days, remainder = divmod(hours, HOURS_PER_DAY)
        remainder_cost = hourly_rate * remainder
        if remainder_cost > daily_rate:
            total_days = full_days + 1
            return daily_rate * total_days, _days_label(total_days, daily_rate, symbol), True

        breakdown = _days_label(full_days, daily_rate, symbol)
        if remainder > 0:
            breakdown = f"{breakdown} + {_hours_label(remainder, hourly_rate, symbol)}"
        return daily_rate * full_days + remainder_cost, breakdown, True
