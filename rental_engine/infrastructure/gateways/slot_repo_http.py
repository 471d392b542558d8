import json
import logging
from typing import Any

import httpx
from pybreaker import CircuitBreaker

from rental_engine.application.interfaces.slot_repo import SlotRepo
from rental_engine.domain.entities.availability_slot import AvailabilitySlot
from rental_engine.domain.errors import InvalidSlotError, SlotsUnavailableError
from rental_engine.domain.services.coverage import coverage_order
from rental_engine.infrastructure.circuit_breaker import CircuitBreakerError, slots_breaker

logger = logging.getLogger(__name__)


def _extract_slot_items(body: Any) -> list[dict[str, Any]]:
    """Accepts a bare list or the API's {"data": ...} / {"slots": ...} envelopes."""
    if isinstance(body, dict):
        body = body.get("data", body)
    if isinstance(body, dict):
        body = body.get("slots", [])
    if not isinstance(body, list):
        return []
    return [item for item in body if isinstance(item, dict)]


class SlotRepoHTTP(SlotRepo):
    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        api_token: str | None = None,
        breaker: CircuitBreaker | None = None,
    ) -> None:
        """
        HTTP-based slot source with configurable timeout.

        Args:
            base_url: Base URL of the remote booking API
            timeout_seconds: Request timeout in seconds
            api_token: Bearer token forwarded to the API, if any
            breaker: Circuit breaker guarding the calls (shared slots breaker by default)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._api_token = api_token
        self._breaker = breaker or slots_breaker

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"
        return headers

    async def get_slots(self, vehicle_id: str) -> list[AvailabilitySlot]:
        """
        Fetch the vehicle's availability slots, protected by Circuit Breaker.

        Always hits the remote API: callers rely on a fresh list before
        submitting a booking.
        """
        url = f"{self._base_url}/vehicles/{vehicle_id}/availability-slots"

        try:
            with self._breaker.calling():
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url, headers=self._headers())
                if response.status_code >= 500:
                    response.raise_for_status()
        except CircuitBreakerError as exc:
            logger.error(
                "Slots circuit breaker is open - service unavailable",
                extra={"vehicle_id": vehicle_id, "circuit_state": str(exc)},
            )
            raise SlotsUnavailableError(vehicle_id, "circuit breaker open") from exc
        except httpx.TimeoutException as exc:
            logger.warning(
                "Slots request timeout",
                extra={"vehicle_id": vehicle_id, "timeout": self._timeout},
            )
            raise SlotsUnavailableError(vehicle_id, "timeout") from exc
        except httpx.HTTPError as exc:
            logger.error("Slots HTTP error", exc_info=exc, extra={"vehicle_id": vehicle_id})
            raise SlotsUnavailableError(vehicle_id, str(exc)) from exc

        if response.status_code == 404:
            return []
        if not 200 <= response.status_code < 300:
            raise SlotsUnavailableError(vehicle_id, f"HTTP {response.status_code}")

        try:
            body = response.json()
        except json.JSONDecodeError as exc:
            raise SlotsUnavailableError(vehicle_id, "invalid JSON body") from exc

        slots: list[AvailabilitySlot] = []
        for item in _extract_slot_items(body):
            try:
                slots.append(AvailabilitySlot.from_payload(item))
            except InvalidSlotError as exc:
                # Skipping leaves a gap, so a malformed slot can never be booked.
                logger.warning(
                    "Skipping malformed availability slot",
                    extra={"vehicle_id": vehicle_id, "slot_id": exc.slot_id, "reason": exc.message},
                )
        return sorted(slots, key=coverage_order)
