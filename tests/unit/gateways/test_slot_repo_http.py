import json
import unittest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from rental_engine.domain.errors import SlotsUnavailableError
from rental_engine.infrastructure.circuit_breaker import build_breaker
from rental_engine.infrastructure.gateways.slot_repo_http import SlotRepoHTTP


def _slot(slot_id, start, end, **overrides):
    item = {
        "id": slot_id,
        "start_datetime": start,
        "end_datetime": end,
        "hourly_rate": 25,
        "daily_rate": 200,
        "min_rental_hours": 1,
        "max_rental_hours": 24,
        "is_active": True,
    }
    item.update(overrides)
    return item


def _response(status_code=200, body=None):
    mock_resp = MagicMock()
    mock_resp.status_code = status_code
    mock_resp.json.return_value = body
    mock_resp.text = json.dumps(body)
    return mock_resp


class TestSlotRepoHTTP(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.repo = SlotRepoHTTP(
            base_url="http://test.com/api/",
            api_token="secret",
            breaker=build_breaker("slots_test"),
        )

    def _client(self, mock_client_cls, response=None, side_effect=None):
        mock_client = AsyncMock()
        mock_client.__aenter__.return_value = mock_client
        if side_effect is not None:
            mock_client.get.side_effect = side_effect
        else:
            mock_client.get.return_value = response
        mock_client_cls.return_value = mock_client
        return mock_client

    @patch("httpx.AsyncClient")
    async def test_get_slots_success(self, mock_client_cls):
        body = [
            _slot("b", "2026-03-10T12:00:00Z", "2026-03-10T20:00:00Z"),
            _slot("a", "2026-03-10T06:00:00Z", "2026-03-10T12:00:00Z", daily_rate=None),
        ]
        mock_client = self._client(mock_client_cls, _response(200, body))

        slots = await self.repo.get_slots("car-1")

        # Ordenados por inicio
        self.assertEqual([slot.id for slot in slots], ["a", "b"])
        self.assertIsNone(slots[0].daily_rate)

        call = mock_client.get.call_args
        self.assertEqual(call.args[0], "http://test.com/api/vehicles/car-1/availability-slots")
        self.assertEqual(call.kwargs["headers"]["Authorization"], "Bearer secret")

    @patch("httpx.AsyncClient")
    async def test_get_slots_accepts_data_envelope(self, mock_client_cls):
        body = {"data": [_slot("a", "2026-03-10T06:00:00Z", "2026-03-10T12:00:00Z")]}
        self._client(mock_client_cls, _response(200, body))

        slots = await self.repo.get_slots("car-1")

        self.assertEqual(len(slots), 1)

    @patch("httpx.AsyncClient")
    async def test_get_active_slots_filters_inactive(self, mock_client_cls):
        body = [
            _slot("a", "2026-03-10T06:00:00Z", "2026-03-10T12:00:00Z"),
            _slot("b", "2026-03-10T12:00:00Z", "2026-03-10T20:00:00Z", is_active=False),
        ]
        self._client(mock_client_cls, _response(200, body))

        slots = await self.repo.get_active_slots("car-1")

        self.assertEqual([slot.id for slot in slots], ["a"])

    @patch("httpx.AsyncClient")
    async def test_malformed_slots_are_skipped(self, mock_client_cls):
        body = [
            _slot("a", "2026-03-10T06:00:00Z", "2026-03-10T12:00:00Z"),
            _slot("broken", "2026-03-10T12:00:00Z", "not-a-date"),
            _slot("negative", "2026-03-10T12:00:00Z", "2026-03-10T20:00:00Z", hourly_rate=-3),
            _slot("loose", "2026-03-10T12:00:00Z", "2026-03-10T20:00:00Z", is_active="false"),
            _slot("fractional", "2026-03-10T12:00:00Z", "2026-03-10T20:00:00Z", min_rental_hours=2.5),
        ]
        self._client(mock_client_cls, _response(200, body))

        slots = await self.repo.get_slots("car-1")

        self.assertEqual([slot.id for slot in slots], ["a"])

    @patch("httpx.AsyncClient")
    async def test_unknown_vehicle_returns_empty_list(self, mock_client_cls):
        self._client(mock_client_cls, _response(404, {"detail": "Not found"}))

        self.assertEqual(await self.repo.get_slots("car-404"), [])

    @patch("httpx.AsyncClient")
    async def test_timeout_raises_slots_unavailable(self, mock_client_cls):
        self._client(mock_client_cls, side_effect=httpx.TimeoutException("Timeout"))

        with self.assertRaises(SlotsUnavailableError) as ctx:
            await self.repo.get_slots("car-1")

        self.assertEqual(ctx.exception.reason, "timeout")
        self.assertEqual(ctx.exception.code, "SLOTS_UNAVAILABLE")

    @patch("httpx.AsyncClient")
    async def test_server_error_raises_slots_unavailable(self, mock_client_cls):
        mock_resp = _response(503, {"detail": "down"})
        mock_resp.raise_for_status.side_effect = httpx.HTTPStatusError(
            "Service Unavailable", request=MagicMock(), response=mock_resp
        )
        self._client(mock_client_cls, mock_resp)

        with self.assertRaises(SlotsUnavailableError):
            await self.repo.get_slots("car-1")

    @patch("httpx.AsyncClient")
    async def test_client_error_raises_slots_unavailable(self, mock_client_cls):
        self._client(mock_client_cls, _response(401, {"detail": "Unauthorized"}))

        with self.assertRaises(SlotsUnavailableError) as ctx:
            await self.repo.get_slots("car-1")

        self.assertEqual(ctx.exception.reason, "HTTP 401")

    @patch("httpx.AsyncClient")
    async def test_invalid_json_raises_slots_unavailable(self, mock_client_cls):
        mock_resp = _response(200)
        mock_resp.json.side_effect = json.JSONDecodeError("Expecting value", "", 0)
        self._client(mock_client_cls, mock_resp)

        with self.assertRaises(SlotsUnavailableError):
            await self.repo.get_slots("car-1")

    @patch("httpx.AsyncClient")
    async def test_open_circuit_fails_fast(self, mock_client_cls):
        repo = SlotRepoHTTP(base_url="http://test.com", breaker=build_breaker("slots_trip", fail_max=1))
        mock_client = self._client(mock_client_cls, side_effect=httpx.ConnectError("refused"))

        with self.assertRaises(SlotsUnavailableError):
            await repo.get_slots("car-1")
        with self.assertRaises(SlotsUnavailableError) as ctx:
            await repo.get_slots("car-1")

        self.assertEqual(ctx.exception.reason, "circuit breaker open")
        self.assertEqual(mock_client.get.call_count, 1)


if __name__ == '__main__':
    unittest.main()
