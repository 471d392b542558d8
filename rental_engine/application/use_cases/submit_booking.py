import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from rental_engine.application.interfaces.booking_gateway import (
    BookingGateway,
    BookingPayload,
    BookingSubmissionResult,
)
from rental_engine.application.interfaces.slot_repo import SlotRepo
from rental_engine.domain.entities.booking_outcome import BookingError, BookingEvaluation
from rental_engine.domain.errors import InvalidWindowError
from rental_engine.domain.services.booking_evaluator import BookingEvaluator
from rental_engine.domain.value_objects.booking_window import BookingWindow
from rental_engine.domain.value_objects.fee_policy import FeePolicy
from rental_engine.domain.value_objects.money import to_amount

logger = logging.getLogger(__name__)


@dataclass
class SubmitBookingOutcome:
    evaluation: BookingEvaluation | None = None
    submission: BookingSubmissionResult | None = None
    error: BookingError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.submission is not None and self.submission.is_success


class SubmitBookingUseCase:
    """
    Re-validates coverage and price against freshly fetched slots, then submits.

    A client-side quote is never trusted for the charge. When the request carries
    the quoted slot id or total and the fresh evaluation fails, or the governing
    slot or total differ from what the client saw, the outcome is
    STALE_AVAILABILITY. Without a prior quote the evaluation error is returned
    as is.
    """

    def __init__(
        self,
        slot_repo: SlotRepo,
        booking_gateway: BookingGateway,
        fee_policy: FeePolicy,
        evaluator: BookingEvaluator | None = None,
    ) -> None:
        self._slot_repo = slot_repo
        self._booking_gateway = booking_gateway
        self._fee_policy = fee_policy
        self._evaluator = evaluator or BookingEvaluator()

    async def execute(
        self,
        vehicle_id: str,
        start: str | datetime,
        end: str | datetime,
        same_day: bool | None = None,
        availability_slot_id: str | None = None,
        expected_total: Decimal | float | None = None,
    ) -> SubmitBookingOutcome:
        try:
            window = BookingWindow.from_iso(start, end)
        except InvalidWindowError:
            return SubmitBookingOutcome(error=BookingError.invalid_window())

        slots = await self._slot_repo.get_active_slots(vehicle_id)
        evaluation = self._evaluator.evaluate(window, slots, self._fee_policy, same_day)

        quoted = availability_slot_id is not None or expected_total is not None
        if not evaluation.ok and not quoted:
            logger.info(
                "Booking window not bookable",
                extra={
                    "vehicle_id": vehicle_id,
                    "window": str(window),
                    "error_code": evaluation.error.kind.value,
                },
            )
            return SubmitBookingOutcome(evaluation=evaluation, error=evaluation.error)

        stale_error = self._detect_stale(evaluation, availability_slot_id, expected_total)
        if stale_error is not None:
            logger.warning(
                "Availability changed before booking submission",
                extra={
                    "vehicle_id": vehicle_id,
                    "window": str(window),
                    "cause": stale_error.cause.value if stale_error.cause else None,
                },
            )
            return SubmitBookingOutcome(evaluation=evaluation, error=stale_error)

        price = evaluation.price
        payload = BookingPayload(
            vehicle_id=vehicle_id,
            availability_slot_id=evaluation.governing_slot.id,
            start_time=window.start.isoformat(),
            end_time=window.end.isoformat(),
            base_amount=float(price.base_amount),
            security_deposit=float(price.security_deposit),
            platform_fee=float(price.platform_fee),
            total_amount=float(price.total),
        )
        submission = await self._booking_gateway.submit_booking(payload)

        if submission.is_success:
            logger.info(
                "Booking submitted",
                extra={"vehicle_id": vehicle_id, "booking_id": submission.booking_id},
            )
        else:
            logger.error(
                "Booking submission failed",
                extra={
                    "vehicle_id": vehicle_id,
                    "error_code": submission.error_code,
                    "http_status": submission.http_status,
                },
            )
        return SubmitBookingOutcome(evaluation=evaluation, submission=submission)

    @staticmethod
    def _detect_stale(
        evaluation: BookingEvaluation,
        availability_slot_id: str | None,
        expected_total: Decimal | float | None,
    ) -> BookingError | None:
        if not evaluation.ok:
            return BookingError.stale(cause=evaluation.error.kind)
        if availability_slot_id is not None and evaluation.governing_slot.id != availability_slot_id:
            return BookingError.stale()
        if expected_total is not None and to_amount(expected_total, "expected_total") != evaluation.price.total:
            return BookingError.stale()
        return None
