import logging
from datetime import datetime

from rental_engine.application.interfaces.slot_repo import SlotRepo
from rental_engine.domain.entities.booking_outcome import BookingError, BookingEvaluation
from rental_engine.domain.entities.coverage import CoverageResult
from rental_engine.domain.errors import InvalidWindowError
from rental_engine.domain.services.booking_evaluator import BookingEvaluator
from rental_engine.domain.services.coverage import SlotCoverageValidator
from rental_engine.domain.value_objects.booking_window import BookingWindow
from rental_engine.domain.value_objects.fee_policy import FeePolicy

logger = logging.getLogger(__name__)


class QuoteBookingUseCase:
    def __init__(
        self,
        slot_repo: SlotRepo,
        fee_policy: FeePolicy,
        evaluator: BookingEvaluator | None = None,
    ) -> None:
        self._slot_repo = slot_repo
        self._fee_policy = fee_policy
        self._evaluator = evaluator or BookingEvaluator()

    async def execute(
        self,
        vehicle_id: str,
        start: str | datetime,
        end: str | datetime,
        same_day: bool | None = None,
    ) -> BookingEvaluation:
        try:
            window = BookingWindow.from_iso(start, end)
        except InvalidWindowError as exc:
            logger.info(
                "Rejected booking window",
                extra={"vehicle_id": vehicle_id, "reason": exc.message},
            )
            return BookingEvaluation(window=None, error=BookingError.invalid_window())

        slots = await self._slot_repo.get_active_slots(vehicle_id)
        evaluation = self._evaluator.evaluate(window, slots, self._fee_policy, same_day)

        if evaluation.ok:
            logger.info(
                "Booking window priced",
                extra={
                    "vehicle_id": vehicle_id,
                    "window": str(window),
                    "slot_id": evaluation.governing_slot.id,
                    "total": str(evaluation.price.total),
                },
            )
        else:
            logger.info(
                "Booking window not bookable",
                extra={
                    "vehicle_id": vehicle_id,
                    "window": str(window),
                    "error_code": evaluation.error.kind.value,
                },
            )
        return evaluation


class CheckCoverageUseCase:
    def __init__(
        self,
        slot_repo: SlotRepo,
        coverage_validator: SlotCoverageValidator | None = None,
    ) -> None:
        self._slot_repo = slot_repo
        self._coverage_validator = coverage_validator or SlotCoverageValidator()

    async def execute(
        self,
        vehicle_id: str,
        start: str | datetime,
        end: str | datetime,
    ) -> CoverageResult:
        """
        Raises:
            InvalidWindowError: si la ventana no es válida (fin <= inicio).
        """
        window = BookingWindow.from_iso(start, end)
        slots = await self._slot_repo.get_active_slots(vehicle_id)
        return self._coverage_validator.is_covered(window, slots)
