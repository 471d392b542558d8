from datetime import date

from rental_engine.application.interfaces.slot_repo import SlotRepo
from rental_engine.domain.entities.availability_slot import AvailabilitySlot
from rental_engine.domain.entities.hour_option import HourOption
from rental_engine.domain.services.coverage import coverage_order
from rental_engine.domain.services.hour_options import HourOptionGenerator


class ListHourOptionsUseCase:
    def __init__(
        self,
        slot_repo: SlotRepo,
        generator: HourOptionGenerator | None = None,
    ) -> None:
        self._slot_repo = slot_repo
        self._generator = generator or HourOptionGenerator()

    async def _ordered_slots(self, vehicle_id: str) -> list[AvailabilitySlot]:
        # Earliest start first, so the first option for an hour is its governing slot.
        return sorted(await self._slot_repo.get_active_slots(vehicle_id), key=coverage_order)

    async def available_dates(self, vehicle_id: str, from_date: date, to_date: date) -> list[date]:
        slots = await self._slot_repo.get_active_slots(vehicle_id)
        return self._generator.available_dates(slots, from_date, to_date)

    async def start_options(self, vehicle_id: str, day: date) -> list[HourOption]:
        slots = await self._ordered_slots(vehicle_id)
        return self._generator.generate(day, slots)

    async def end_options(
        self,
        vehicle_id: str,
        start_date: date,
        start_hour: int,
        end_date: date | None = None,
        slot_id: str | None = None,
    ) -> list[HourOption]:
        slots = await self._ordered_slots(vehicle_id)
        candidates = [
            option
            for option in self._generator.generate(start_date, slots)
            if option.hour == start_hour and (slot_id is None or option.slot.id == slot_id)
        ]
        if not candidates:
            return []
        return self._generator.end_options(
            start_date=start_date,
            start_hour=start_hour,
            governing_slot=candidates[0].slot,
            slots=slots,
            end_date=end_date,
        )
