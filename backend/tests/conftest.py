import json
from typing import List, Optional

import pytest

from trip_planner.llm.client import GenerativeClient
from trip_planner.models.domain import ForecastDay
from trip_planner.models.schemas import PlanRequest

MODEL_PAYLOAD = {
    "days": [
        {
            "day": 1,
            "activities": ["Fort Aguada", "Candolim beach"],
            "hospital": "Manipal Hospital",
            "pharmacy": "Wellness Forever",
            "tip": "Start early to beat the heat.",
        },
        {
            "day": 2,
            "activities": ["Dudhsagar falls trek"],
            "hospital": "GMC Bambolim",
            "pharmacy": "Apollo Pharmacy",
            "tip": "Carry rain gear.",
        },
    ]
}


class FakeWeather:
    def __init__(self, forecast: Optional[List[ForecastDay]] = None, error: Optional[Exception] = None):
        self._forecast = forecast or []
        self._error = error
        self.calls: List[str] = []

    def forecast(self, destination: str) -> List[ForecastDay]:
        self.calls.append(destination)
        if self._error:
            raise self._error
        return list(self._forecast)


class FakeBackend:
    def __init__(self, text: str = "", error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.prompts: List[str] = []

    def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.text


@pytest.fixture
def goa_request() -> PlanRequest:
    return PlanRequest(
        destination="Goa",
        start_date="2025-12-01",
        end_date="2025-12-03",
        budget=25000,
        theme="Adventure",
    )


@pytest.fixture
def model_text() -> str:
    return "```json\n" + json.dumps(MODEL_PAYLOAD) + "\n```"


def client_returning(text: str) -> GenerativeClient:
    return GenerativeClient(backend=FakeBackend(text=text), timeout=5)


def failing_client(error: Exception = RuntimeError("vertex down")) -> GenerativeClient:
    return GenerativeClient(backend=FakeBackend(error=error), timeout=5)
