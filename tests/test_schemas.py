import pytest
from pydantic import ValidationError

from rental_engine.api.schemas.bookings import (
    AvailabilitySlotSchema,
    BookingErrorResponse,
    CoverageResponse,
    QuoteResponse,
    SubmitBookingRequest,
)
from rental_engine.domain.entities.booking_outcome import BookingError, BookingErrorKind
from rental_engine.domain.entities.coverage import Covered, Gap
from rental_engine.domain.services.booking_evaluator import BookingEvaluator
from rental_engine.domain.value_objects.fee_policy import FeePolicy
from tests.helpers import at, make_slot, window


@pytest.fixture()
def base_request_payload():
    return {
        "start": "2026-03-10T08:00:00Z",
        "end": "2026-03-10T18:00:00Z",
        "same_day": True,
        "availability_slot_id": "a",
        "expected_total": 270,
    }


def test_submit_request_accepts_valid_payload(base_request_payload):
    request = SubmitBookingRequest(**base_request_payload)

    assert request.start == "2026-03-10T08:00:00Z"
    assert request.expected_total == 270


def test_submit_request_rejects_unknown_fields(base_request_payload):
    base_request_payload["discount_code"] = "FREE"

    with pytest.raises(ValidationError):
        SubmitBookingRequest(**base_request_payload)


def test_submit_request_rejects_negative_total(base_request_payload):
    base_request_payload["expected_total"] = -1

    with pytest.raises(ValidationError):
        SubmitBookingRequest(**base_request_payload)


def test_slot_schema_mirrors_domain_slot():
    schema = AvailabilitySlotSchema.from_domain(make_slot(6, 22, slot_id="a", daily_rate=None))

    assert schema.id == "a"
    assert schema.start_datetime == at(6)
    assert schema.hourly_rate == 25.0
    assert schema.daily_rate is None


def test_coverage_response_shapes():
    covered = CoverageResponse.from_domain(Covered(slots=(make_slot(0, 5, slot_id="a"),)))
    gap = CoverageResponse.from_domain(Gap(at=at(5)))

    assert covered.model_dump(exclude_none=True) == {"covered": True, "contributing_slot_ids": ["a"]}
    assert gap.covered is False
    assert gap.gap_at == at(5)


def test_quote_response_from_evaluation():
    evaluation = BookingEvaluator().evaluate(window(8, 18), [make_slot(0, 24, slot_id="a")], FeePolicy())

    response = QuoteResponse.from_evaluation("car-1", evaluation)

    assert response.governing_slot_id == "a"
    assert response.price.total == 270.0
    assert response.price.breakdown == "Daily rate (better than 10h × ₹25)"
    assert response.coverage.contributing_slot_ids == ["a"]


def test_error_response_omits_unset_fields():
    error = BookingError(kind=BookingErrorKind.DURATION_VIOLATION, message="too short", bound="min", limit=4)

    body = BookingErrorResponse.from_domain(error).model_dump(mode="json", exclude_none=True)

    assert body == {"code": "DURATION_VIOLATION", "message": "too short", "bound": "min", "limit": 4}
