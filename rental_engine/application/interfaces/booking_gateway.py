from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class BookingPayload:
    vehicle_id: str
    availability_slot_id: str | None
    start_time: str
    end_time: str
    base_amount: float
    security_deposit: float
    platform_fee: float
    total_amount: float

    def to_json(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class BookingSubmissionResult:
    status: str  # SUCCESS, FAILED
    booking_id: str | None = None
    payload: dict[str, Any] | None = None
    error_code: str | None = None
    error_message: str | None = None
    http_status: int | None = None

    @property
    def is_success(self) -> bool:
        return self.status == "SUCCESS"


class BookingGateway(ABC):
    @abstractmethod
    async def submit_booking(self, payload: BookingPayload) -> BookingSubmissionResult:
        """
        Sends the priced booking to the remote booking API.
        """
        pass
