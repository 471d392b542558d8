from uuid import uuid4

from rental_engine.application.interfaces.booking_gateway import (
    BookingGateway,
    BookingPayload,
    BookingSubmissionResult,
)


class StubBookingGateway(BookingGateway):
    def __init__(self) -> None:
        self.submitted: list[BookingPayload] = []

    async def submit_booking(self, payload: BookingPayload) -> BookingSubmissionResult:
        self.submitted.append(payload)
        booking_id = f"BK-{uuid4().hex[:8].upper()}"
        return BookingSubmissionResult(
            status="SUCCESS",
            booking_id=booking_id,
            payload={"id": booking_id, **payload.to_json()},
            http_status=201,
        )
