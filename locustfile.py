import random

from locust import HttpUser, between, task

# Demo vehicle seeded by the in-memory repository
VEHICLE_ID = "car-1"


class APIUser(HttpUser):
    # Wait between 1 and 3 seconds between tasks
    wait_time = between(1, 3)

    def on_start(self):
        """
        Called when a Locust user starts.
        Picks the day every request of this user will browse.
        """
        self.day = f"2026-03-{random.randint(10, 20):02d}"

    @task(3)
    def list_hour_options(self):
        """
        Task to simulate the date step of the booking flow.
        """
        self.client.get(
            f"/api/v1/vehicles/{VEHICLE_ID}/hour-options",
            params={"date": self.day},
            name="/api/v1/vehicles/[id]/hour-options",  # Group all requests under this name in the stats
        )

    @task
    def quote_booking(self):
        """
        Task to simulate pricing a selected window.
        422 answers (gaps, duration limits) are expected outcomes, not failures.
        """
        start_hour = random.randint(6, 12)
        payload = {
            "start": f"{self.day}T{start_hour:02d}:00:00Z",
            "end": f"{self.day}T{start_hour + random.randint(1, 10):02d}:00:00Z",
        }
        with self.client.post(
            f"/api/v1/vehicles/{VEHICLE_ID}/quote",
            json=payload,
            name="/api/v1/vehicles/[id]/quote",
            catch_response=True,
        ) as response:
            if response.status_code in (200, 422):
                response.success()
