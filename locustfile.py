from locust import HttpUser, task, between
import random

SECTORS = ["sector-retail", "sector-telecom", "sector-finance", "sector-agriculture"]
SAMPLES = [
    "Strong growth and rising exports signal positive momentum",
    "Inflation and unemployment deepen the crisis for small traders",
    "Mobile money volumes were flat this quarter",
    "Coffee prices surge as harvest improvement boosts profit",
]


class AnalyzeUser(HttpUser):
    wait_time = between(1, 2)

    @task(3)
    def analyze_text(self):
        self.client.post(
            "/api/sentiment/analyze",
            json={"text": random.choice(SAMPLES), "sectorId": random.choice(SECTORS)},
        )

    @task(1)
    def view_dashboard(self):
        slug = random.choice(SECTORS).removeprefix("sector-")
        self.client.get(f"/api/dashboard/{slug}", name="/api/dashboard/[sector]")
