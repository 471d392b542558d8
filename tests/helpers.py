"""Shared builders for slots and windows used across the test suite."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from rental_engine.domain.entities.availability_slot import AvailabilitySlot
from rental_engine.domain.value_objects.booking_window import BookingWindow

# Midnight UTC of the reference day; tests express instants as hour offsets from it.
BASE = datetime(2026, 3, 10, 0, 0, tzinfo=timezone.utc)


def at(hours: float) -> datetime:
    return BASE + timedelta(hours=hours)


def window(start_hour: float, end_hour: float) -> BookingWindow:
    return BookingWindow(start=at(start_hour), end=at(end_hour))


def make_slot(
    start_hour: float,
    end_hour: float,
    slot_id: str | None = "slot-1",
    hourly_rate: Decimal | int | str = 25,
    daily_rate: Decimal | int | str | None = 200,
    min_hours: int = 1,
    max_hours: int = 24,
    is_active: bool = True,
) -> AvailabilitySlot:
    return AvailabilitySlot(
        id=slot_id,
        start=at(start_hour),
        end=at(end_hour),
        hourly_rate=hourly_rate,
        daily_rate=daily_rate,
        min_rental_hours=min_hours,
        max_rental_hours=max_hours,
        is_active=is_active,
    )
