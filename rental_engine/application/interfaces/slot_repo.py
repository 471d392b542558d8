"""Interface SlotRepo - Puerto para obtener los slots de un vehículo."""

from abc import ABC, abstractmethod

from rental_engine.domain.entities.availability_slot import AvailabilitySlot


class SlotRepo(ABC):
    """
    Puerto hacia el almacén remoto de slots de disponibilidad.

    La lista puede cambiar entre la selección del cliente y el envío de la
    reserva: los casos de uso vuelven a consultarla antes de cobrar.
    """

    @abstractmethod
    async def get_slots(self, vehicle_id: str) -> list[AvailabilitySlot]:
        """
        Retorna los slots del vehículo ordenados por inicio.

        Raises:
            SlotsUnavailableError: si el almacén no responde.
        """
        raise NotImplementedError

    async def get_active_slots(self, vehicle_id: str) -> list[AvailabilitySlot]:
        """Retorna sólo los slots activos."""
        return [slot for slot in await self.get_slots(vehicle_id) if slot.is_active]
