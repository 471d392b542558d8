from datetime import datetime, timezone
from typing import Iterable

from rental_engine.application.interfaces.slot_repo import SlotRepo
from rental_engine.domain.entities.availability_slot import AvailabilitySlot
from rental_engine.domain.services.coverage import coverage_order

DEMO_VEHICLE_ID = "car-1"


def demo_slots() -> list[AvailabilitySlot]:
    """Two back-to-back March 2026 slots with different rates for local runs and load tests."""
    return [
        AvailabilitySlot(
            id="demo-early-march",
            start=datetime(2026, 3, 1, 6, tzinfo=timezone.utc),
            end=datetime(2026, 3, 15, 22, tzinfo=timezone.utc),
            hourly_rate=25,
            daily_rate=200,
            min_rental_hours=1,
            max_rental_hours=12,
        ),
        AvailabilitySlot(
            id="demo-late-march",
            start=datetime(2026, 3, 15, 22, tzinfo=timezone.utc),
            end=datetime(2026, 3, 31, 22, tzinfo=timezone.utc),
            hourly_rate=30,
            daily_rate=220,
            min_rental_hours=2,
            max_rental_hours=12,
        ),
    ]


class InMemorySlotRepo(SlotRepo):
    def __init__(self) -> None:
        self._slots: dict[str, list[AvailabilitySlot]] = {}

    def set_slots(self, vehicle_id: str, slots: Iterable[AvailabilitySlot]) -> None:
        self._slots[vehicle_id] = sorted(slots, key=coverage_order)

    def seed_demo(self) -> None:
        self.set_slots(DEMO_VEHICLE_ID, demo_slots())

    def clear(self) -> None:
        self._slots.clear()

    async def get_slots(self, vehicle_id: str) -> list[AvailabilitySlot]:
        return list(self._slots.get(vehicle_id, []))
