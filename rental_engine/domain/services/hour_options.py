"""Generador de horas seleccionables a partir de los slots publicados."""

from datetime import date, timedelta
from typing import Iterable

from rental_engine.domain.constants import FIRST_HOUR_OF_DAY, LAST_HOUR_OF_DAY
from rental_engine.domain.entities.availability_slot import AvailabilitySlot
from rental_engine.domain.entities.hour_option import HourOption


class HourOptionGenerator:
    """
    Lista las horas rentables de una fecha, etiquetadas con el slot que las cubre.

    Si varios slots cubren la misma hora se emiten todas las entradas: elegir el
    slot afecta el precio, así que la desambiguación queda del lado del llamador.
    """

    def generate(self, day: date, slots: Iterable[AvailabilitySlot]) -> list[HourOption]:
        options: list[HourOption] = []
        for slot in slots:
            if not slot.is_active or not slot.covers_date(day):
                continue
            start_hour = slot.start.hour if day == slot.start_date else FIRST_HOUR_OF_DAY
            end_hour = slot.end.hour if day == slot.end_date else LAST_HOUR_OF_DAY
            options.extend(HourOption(hour=hour, slot=slot) for hour in range(start_hour, end_hour + 1))
        return options

    def available_dates(
        self,
        slots: Iterable[AvailabilitySlot],
        from_date: date,
        to_date: date,
    ) -> list[date]:
        """
        Fechas del calendario con alguna disponibilidad dentro de [from_date, to_date].

        Cada slot activo marca todas las fechas desde su fecha de inicio hasta su
        fecha de fin, ambas inclusive.
        """
        dates: set[date] = set()
        for slot in slots:
            if not slot.is_active:
                continue
            day = max(slot.start_date, from_date)
            last = min(slot.end_date, to_date)
            while day <= last:
                dates.add(day)
                day += timedelta(days=1)
        return sorted(dates)

    def end_options(
        self,
        start_date: date,
        start_hour: int,
        governing_slot: AvailabilitySlot,
        slots: Iterable[AvailabilitySlot],
        end_date: date | None = None,
    ) -> list[HourOption]:
        """
        Horas de fin ofrecidas una vez elegido el inicio.

        Mismo día: horas posteriores al inicio cuya distancia respeta el mínimo y
        máximo del slot gobernante. Fecha distinta: todas las horas de esa fecha;
        el tope de duración del mismo día no aplica a reservas de varios días.
        """
        if end_date is not None and end_date < start_date:
            return []

        if end_date is not None and end_date > start_date:
            return self.generate(end_date, slots)

        options: list[HourOption] = []
        seen: set[int] = set()
        for option in self.generate(start_date, slots):
            duration = option.hour - start_hour
            if option.hour in seen or duration <= 0:
                continue
            if governing_slot.min_rental_hours <= duration <= governing_slot.max_rental_hours:
                seen.add(option.hour)
                options.append(HourOption(hour=option.hour, slot=governing_slot))
        return options
