import json
import logging
from typing import Any

import httpx
from pybreaker import CircuitBreaker

from rental_engine.application.interfaces.booking_gateway import (
    BookingGateway,
    BookingPayload,
    BookingSubmissionResult,
)
from rental_engine.infrastructure.circuit_breaker import CircuitBreakerError, bookings_breaker

logger = logging.getLogger(__name__)


def _extract_booking_id(body: Any) -> str | None:
    if not isinstance(body, dict):
        return None
    data = body.get("data") if isinstance(body.get("data"), dict) else body
    booking_id = data.get("id") or data.get("booking_id")
    return str(booking_id) if booking_id is not None else None


class BookingGatewayHTTP(BookingGateway):
    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 15.0,
        api_token: str | None = None,
        breaker: CircuitBreaker | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._api_token = api_token
        self._breaker = breaker or bookings_breaker

    async def submit_booking(self, payload: BookingPayload) -> BookingSubmissionResult:
        """
        Submit the booking to the remote API, protected by Circuit Breaker.

        Returns:
            BookingSubmissionResult with status SUCCESS or FAILED
        """
        url = f"{self._base_url}/bookings/"
        headers = {"Content-Type": "application/json"}
        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"

        try:
            with self._breaker.calling():
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(url, json=payload.to_json(), headers=headers)
                if response.status_code >= 500:
                    response.raise_for_status()
        except CircuitBreakerError as exc:
            logger.error(
                "Bookings circuit breaker is open - service unavailable",
                extra={"vehicle_id": payload.vehicle_id, "circuit_state": str(exc)},
            )
            return BookingSubmissionResult(
                status="FAILED",
                error_code="CIRCUIT_OPEN",
                error_message="Booking service temporarily unavailable (circuit breaker open)",
            )
        except httpx.TimeoutException as exc:
            logger.warning(
                "Booking request timeout",
                extra={"vehicle_id": payload.vehicle_id, "timeout": self._timeout},
            )
            return BookingSubmissionResult(
                status="FAILED",
                error_code="TIMEOUT",
                error_message=str(exc),
            )
        except httpx.HTTPStatusError as exc:
            return BookingSubmissionResult(
                status="FAILED",
                error_code="NON_2XX",
                error_message=exc.response.text,
                http_status=exc.response.status_code,
            )
        except httpx.HTTPError as exc:
            logger.error("Booking HTTP error", exc_info=exc, extra={"vehicle_id": payload.vehicle_id})
            return BookingSubmissionResult(
                status="FAILED",
                error_code="HTTP_ERROR",
                error_message=str(exc),
            )

        body: dict[str, Any] | None = None
        try:
            body = response.json()
        except json.JSONDecodeError:
            body = None

        if 200 <= response.status_code < 300:
            return BookingSubmissionResult(
                status="SUCCESS",
                booking_id=_extract_booking_id(body),
                payload=body,
                http_status=response.status_code,
            )

        return BookingSubmissionResult(
            status="FAILED",
            payload=body,
            error_code="NON_2XX",
            error_message=response.text,
            http_status=response.status_code,
        )
