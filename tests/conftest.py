"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Construcción de slots y ventanas de reserva
- Cliente HTTP de prueba (FastAPI TestClient) con repositorio in-memory
"""

import pytest
from fastapi.testclient import TestClient

from rental_engine.api.dependencies import _in_memory_bundle
from rental_engine.domain.value_objects.fee_policy import FeePolicy
from rental_engine.main import app
from tests.helpers import make_slot


@pytest.fixture
def slot_factory():
    return make_slot


@pytest.fixture
def fee_policy():
    return FeePolicy()


@pytest.fixture
def in_memory_bundle():
    bundle = _in_memory_bundle()
    bundle["slot_repo"].clear()
    bundle["booking_gateway"].submitted.clear()
    yield bundle
    bundle["slot_repo"].clear()
    bundle["booking_gateway"].submitted.clear()


@pytest.fixture
def client(in_memory_bundle):
    with TestClient(app) as test_client:
        yield test_client
