from functools import lru_cache

from fastapi import Depends

from rental_engine.application.use_cases.list_hour_options import ListHourOptionsUseCase
from rental_engine.application.use_cases.quote_booking import CheckCoverageUseCase, QuoteBookingUseCase
from rental_engine.application.use_cases.submit_booking import SubmitBookingUseCase
from rental_engine.config import Settings, get_settings
from rental_engine.domain.value_objects.fee_policy import FeePolicy
from rental_engine.infrastructure.gateways.booking_gateway_http import BookingGatewayHTTP
from rental_engine.infrastructure.gateways.slot_repo_http import SlotRepoHTTP
from rental_engine.infrastructure.in_memory.booking_gateway import StubBookingGateway
from rental_engine.infrastructure.in_memory.slot_repo import InMemorySlotRepo


@lru_cache(maxsize=1)
def _in_memory_bundle():
    slot_repo = InMemorySlotRepo()
    slot_repo.seed_demo()
    return {
        "slot_repo": slot_repo,
        "booking_gateway": StubBookingGateway(),
    }


def _http_bundle(settings: Settings):
    if not settings.rentals_api_base_url:
        raise RuntimeError("rentals_api_base_url is required when use_in_memory is false")
    return {
        "slot_repo": SlotRepoHTTP(
            base_url=settings.rentals_api_base_url,
            timeout_seconds=settings.slots_timeout_seconds,
            api_token=settings.rentals_api_token,
        ),
        "booking_gateway": BookingGatewayHTTP(
            base_url=settings.rentals_api_base_url,
            timeout_seconds=settings.booking_timeout_seconds,
            api_token=settings.rentals_api_token,
        ),
    }


def get_use_cases(settings: Settings = Depends(get_settings)):
    bundle = _in_memory_bundle() if settings.use_in_memory else _http_bundle(settings)
    fee_policy = FeePolicy.from_settings(settings)

    return {
        "hour_options": ListHourOptionsUseCase(slot_repo=bundle["slot_repo"]),
        "check_coverage": CheckCoverageUseCase(slot_repo=bundle["slot_repo"]),
        "quote_booking": QuoteBookingUseCase(
            slot_repo=bundle["slot_repo"],
            fee_policy=fee_policy,
        ),
        "submit_booking": SubmitBookingUseCase(
            slot_repo=bundle["slot_repo"],
            booking_gateway=bundle["booking_gateway"],
            fee_policy=fee_policy,
        ),
    }
