"""
Circuit Breaker configuration for the remote booking API.

Both collaborators (slot fetch and booking submission) live behind the same
remote API but fail independently, so each gets its own breaker:
- CLOSED: Normal operation, requests pass through
- OPEN: Too many failures, requests fail immediately
- HALF_OPEN: Testing if service recovered, limited requests allowed

Only transport errors and 5xx responses count as failures; 4xx responses are
answers from a healthy service.
"""

import logging

from pybreaker import CircuitBreaker, CircuitBreakerError, CircuitBreakerListener

logger = logging.getLogger(__name__)

FAIL_MAX = 5
RESET_TIMEOUT_SECONDS = 60


def log_circuit_state_change(breaker_name: str, old_state: str, new_state: str):
    logger.warning(
        "Circuit breaker state changed",
        extra={
            "breaker_name": breaker_name,
            "old_state": old_state,
            "new_state": new_state,
        }
    )


class StateChangeLogger(CircuitBreakerListener):
    """Listener for circuit breaker state changes."""

    def __init__(self, name: str):
        self.name = name

    def state_change(self, cb, old_state, new_state):
        log_circuit_state_change(self.name, old_state.name, new_state.name)


def build_breaker(name: str, fail_max: int = FAIL_MAX, reset_timeout: int = RESET_TIMEOUT_SECONDS) -> CircuitBreaker:
    return CircuitBreaker(
        fail_max=fail_max,
        reset_timeout=reset_timeout,
        name=f"{name}_circuit_breaker",
        listeners=[StateChangeLogger(name)],
    )


slots_breaker = build_breaker("slots")
bookings_breaker = build_breaker("bookings")


__all__ = [
    "bookings_breaker",
    "build_breaker",
    "slots_breaker",
    "CircuitBreakerError",
]
