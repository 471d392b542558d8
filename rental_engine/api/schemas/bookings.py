from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from rental_engine.application.interfaces.booking_gateway import BookingSubmissionResult
from rental_engine.domain.entities.availability_slot import AvailabilitySlot
from rental_engine.domain.entities.booking_outcome import BookingError, BookingEvaluation
from rental_engine.domain.entities.coverage import CoverageResult
from rental_engine.domain.entities.hour_option import HourOption
from rental_engine.domain.entities.price_breakdown import PriceBreakdown


class AvailabilitySlotSchema(BaseModel):
    id: str | None = None
    start_datetime: datetime
    end_datetime: datetime
    hourly_rate: float = Field(ge=0)
    daily_rate: float | None = Field(default=None, ge=0)
    min_rental_hours: int = Field(ge=1)
    max_rental_hours: int = Field(ge=1)
    is_active: bool = True

    @classmethod
    def from_domain(cls, slot: AvailabilitySlot) -> "AvailabilitySlotSchema":
        return cls.model_validate(slot.to_payload())


class HourOptionSchema(BaseModel):
    hour: int = Field(ge=0, le=23)
    slot: AvailabilitySlotSchema

    @classmethod
    def from_domain(cls, option: HourOption) -> "HourOptionSchema":
        return cls(hour=option.hour, slot=AvailabilitySlotSchema.from_domain(option.slot))


class HourOptionsResponse(BaseModel):
    vehicle_id: str
    day: date
    options: list[HourOptionSchema]

    @classmethod
    def build(cls, vehicle_id: str, day: date, options: list[HourOption]) -> "HourOptionsResponse":
        return cls(
            vehicle_id=vehicle_id,
            day=day,
            options=[HourOptionSchema.from_domain(option) for option in options],
        )


class AvailableDatesResponse(BaseModel):
    vehicle_id: str
    from_date: date
    to_date: date
    dates: list[date]


class BookingWindowRequest(BaseModel):
    """Timestamps stay raw strings: unparseable input is an INVALID_WINDOW outcome."""

    model_config = ConfigDict(extra="forbid")

    start: str
    end: str


class QuoteRequest(BookingWindowRequest):
    same_day: bool | None = None


class SubmitBookingRequest(QuoteRequest):
    availability_slot_id: str | None = None
    expected_total: float | None = Field(default=None, ge=0)


class CoverageResponse(BaseModel):
    covered: bool
    gap_at: datetime | None = None
    contributing_slot_ids: list[str] | None = None

    @classmethod
    def from_domain(cls, coverage: CoverageResult) -> "CoverageResponse":
        return cls.model_validate(coverage.to_payload())


class PriceBreakdownResponse(BaseModel):
    base_amount: float
    security_deposit: float
    platform_fee: float
    total: float
    hours: int
    breakdown: str
    used_daily_rate: bool

    @classmethod
    def from_domain(cls, price: PriceBreakdown) -> "PriceBreakdownResponse":
        return cls.model_validate(price.to_payload())


class QuoteResponse(BaseModel):
    vehicle_id: str
    start: datetime
    end: datetime
    governing_slot_id: str | None = None
    coverage: CoverageResponse
    price: PriceBreakdownResponse

    @classmethod
    def from_evaluation(cls, vehicle_id: str, evaluation: BookingEvaluation) -> "QuoteResponse":
        return cls(
            vehicle_id=vehicle_id,
            start=evaluation.window.start,
            end=evaluation.window.end,
            governing_slot_id=evaluation.governing_slot.id,
            coverage=CoverageResponse.from_domain(evaluation.coverage),
            price=PriceBreakdownResponse.from_domain(evaluation.price),
        )


class SubmitBookingResponse(BaseModel):
    booking_id: str | None = None
    status: str
    vehicle_id: str
    availability_slot_id: str | None = None
    start_time: datetime
    end_time: datetime
    price: PriceBreakdownResponse

    @classmethod
    def build(
        cls,
        vehicle_id: str,
        evaluation: BookingEvaluation,
        submission: BookingSubmissionResult,
    ) -> "SubmitBookingResponse":
        return cls(
            booking_id=submission.booking_id,
            status=submission.status,
            vehicle_id=vehicle_id,
            availability_slot_id=evaluation.governing_slot.id,
            start_time=evaluation.window.start,
            end_time=evaluation.window.end,
            price=PriceBreakdownResponse.from_domain(evaluation.price),
        )


class BookingErrorResponse(BaseModel):
    code: str
    message: str
    gap_at: datetime | None = None
    bound: str | None = None
    limit: int | None = None
    cause: str | None = None

    @classmethod
    def from_domain(cls, error: BookingError) -> "BookingErrorResponse":
        return cls.model_validate(error.to_payload())

