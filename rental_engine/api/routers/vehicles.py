from datetime import date

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from rental_engine.api.dependencies import get_use_cases
from rental_engine.api.schemas.bookings import (
    AvailableDatesResponse,
    BookingErrorResponse,
    BookingWindowRequest,
    CoverageResponse,
    HourOptionsResponse,
    QuoteRequest,
    QuoteResponse,
    SubmitBookingRequest,
    SubmitBookingResponse,
)
from rental_engine.domain.entities.booking_outcome import BookingError, BookingErrorKind
from rental_engine.domain.errors import InvalidWindowError

router = APIRouter()

ERROR_STATUS = {
    BookingErrorKind.INVALID_WINDOW: status.HTTP_422_UNPROCESSABLE_ENTITY,
    BookingErrorKind.NO_AVAILABILITY: status.HTTP_422_UNPROCESSABLE_ENTITY,
    BookingErrorKind.COVERAGE_GAP: status.HTTP_422_UNPROCESSABLE_ENTITY,
    BookingErrorKind.DURATION_VIOLATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    BookingErrorKind.STALE_AVAILABILITY: status.HTTP_409_CONFLICT,
}


def _error_response(error: BookingError) -> JSONResponse:
    body = BookingErrorResponse.from_domain(error)
    return JSONResponse(
        status_code=ERROR_STATUS[error.kind],
        content=body.model_dump(mode="json", exclude_none=True),
    )


@router.get(
    "/vehicles/{vehicle_id}/available-dates",
    response_model=AvailableDatesResponse,
    status_code=status.HTTP_200_OK,
)
async def list_available_dates(
    vehicle_id: str,
    from_date: date,
    to_date: date,
    use_cases=Depends(get_use_cases),
) -> AvailableDatesResponse:
    dates = await use_cases["hour_options"].available_dates(
        vehicle_id=vehicle_id,
        from_date=from_date,
        to_date=to_date,
    )
    return AvailableDatesResponse(vehicle_id=vehicle_id, from_date=from_date, to_date=to_date, dates=dates)


@router.get(
    "/vehicles/{vehicle_id}/hour-options",
    response_model=HourOptionsResponse,
    status_code=status.HTTP_200_OK,
)
async def list_hour_options(
    vehicle_id: str,
    day: date = Query(alias="date"),
    use_cases=Depends(get_use_cases),
) -> HourOptionsResponse:
    options = await use_cases["hour_options"].start_options(vehicle_id=vehicle_id, day=day)
    return HourOptionsResponse.build(vehicle_id, day, options)


@router.get(
    "/vehicles/{vehicle_id}/end-hour-options",
    response_model=HourOptionsResponse,
    status_code=status.HTTP_200_OK,
)
async def list_end_hour_options(
    vehicle_id: str,
    start_date: date,
    start_hour: int = Query(ge=0, le=23),
    end_date: date | None = None,
    slot_id: str | None = None,
    use_cases=Depends(get_use_cases),
) -> HourOptionsResponse:
    options = await use_cases["hour_options"].end_options(
        vehicle_id=vehicle_id,
        start_date=start_date,
        start_hour=start_hour,
        end_date=end_date,
        slot_id=slot_id,
    )
    return HourOptionsResponse.build(vehicle_id, end_date or start_date, options)


@router.post(
    "/vehicles/{vehicle_id}/coverage",
    response_model=CoverageResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
async def check_coverage(
    vehicle_id: str,
    payload: BookingWindowRequest,
    use_cases=Depends(get_use_cases),
):
    try:
        coverage = await use_cases["check_coverage"].execute(
            vehicle_id=vehicle_id,
            start=payload.start,
            end=payload.end,
        )
    except InvalidWindowError:
        return _error_response(BookingError.invalid_window())
    return CoverageResponse.from_domain(coverage)


@router.post(
    "/vehicles/{vehicle_id}/quote",
    response_model=QuoteResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": BookingErrorResponse}},
)
async def quote_booking(
    vehicle_id: str,
    payload: QuoteRequest,
    use_cases=Depends(get_use_cases),
):
    evaluation = await use_cases["quote_booking"].execute(
        vehicle_id=vehicle_id,
        start=payload.start,
        end=payload.end,
        same_day=payload.same_day,
    )
    if not evaluation.ok:
        return _error_response(evaluation.error)
    return QuoteResponse.from_evaluation(vehicle_id, evaluation)


@router.post(
    "/vehicles/{vehicle_id}/bookings",
    response_model=SubmitBookingResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": BookingErrorResponse},
        422: {"model": BookingErrorResponse},
        502: {"model": BookingErrorResponse},
    },
)
async def submit_booking(
    vehicle_id: str,
    payload: SubmitBookingRequest,
    use_cases=Depends(get_use_cases),
):
    outcome = await use_cases["submit_booking"].execute(
        vehicle_id=vehicle_id,
        start=payload.start,
        end=payload.end,
        same_day=payload.same_day,
        availability_slot_id=payload.availability_slot_id,
        expected_total=payload.expected_total,
    )
    if outcome.error is not None:
        return _error_response(outcome.error)

    submission = outcome.submission
    if not submission.is_success:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={
                "code": "BOOKING_SUBMISSION_FAILED",
                "message": "We couldn't confirm your booking right now. Please try again.",
                "cause": submission.error_code,
            },
        )
    return SubmitBookingResponse.build(vehicle_id, outcome.evaluation, submission)
