"""Constantes del dominio de disponibilidad y precios."""

from datetime import timedelta
from decimal import Decimal

ONE_HOUR = timedelta(hours=1)
HOURS_PER_DAY = 24
FIRST_HOUR_OF_DAY = 0
LAST_HOUR_OF_DAY = 23

# Política de cargos de referencia (ver FeePolicy)
DEFAULT_SECURITY_DEPOSIT = Decimal("50")
DEFAULT_PLATFORM_FEE_RATE = Decimal("0.10")
DEFAULT_CURRENCY_SYMBOL = "₹"

# Límites de duración
DURATION_BOUND_MIN = "min"
DURATION_BOUND_MAX = "max"
