from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rental_engine.domain.constants import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_PLATFORM_FEE_RATE,
    DEFAULT_SECURITY_DEPOSIT,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    use_in_memory: bool = True
    rentals_api_base_url: str | None = None  # e.g. https://api.example.com
    rentals_api_token: str | None = None
    slots_timeout_seconds: float = 10.0
    booking_timeout_seconds: float = 15.0

    security_deposit: Decimal = Field(default=DEFAULT_SECURITY_DEPOSIT, ge=0)
    platform_fee_rate: Decimal = Field(default=DEFAULT_PLATFORM_FEE_RATE, ge=0)
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL

    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
