"""Helpers monetarios - montos como Decimal no negativos."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from rental_engine.domain.errors import InvalidMoneyError

WHOLE_UNIT = Decimal("1")


def to_amount(value: Decimal | int | float | str, field: str = "amount") -> Decimal:
    """
    Convierte un valor a un monto Decimal no negativo.

    Los floats pasan por str() para no arrastrar errores binarios (0.1 -> "0.1").
    """
    if isinstance(value, bool):
        raise InvalidMoneyError(f"{field} no puede ser booleano: {value}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidMoneyError(f"{field} no es un monto válido: {value!r}") from exc

    if not amount.is_finite():
        raise InvalidMoneyError(f"{field} debe ser finito: {value}")
    if amount < 0:
        raise InvalidMoneyError(f"{field} no puede ser negativo: {value}")
    return amount


def round_to_unit(amount: Decimal) -> Decimal:
    """Redondea a la unidad monetaria entera más cercana (mitades hacia arriba)."""
    return amount.quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal) -> str:
    """
    Formatea un monto para descripciones legibles.

    Ejemplos: Decimal("25.00") -> "25", Decimal("25.50") -> "25.5".
    """
    if amount == amount.to_integral_value():
        return str(int(amount))
    return format(amount.normalize(), "f")
