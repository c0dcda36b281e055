"""Shared fixtures for dashboard tests.

HTTP is never hit: API tests hand a FakeSession to the extractor.
"""

import json
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add project root to path so tests can import the packages directly
sys.path.insert(0, str(Path(__file__).parent.parent))


class FakeResponse:
    def __init__(self, status_code: int = 200, body=None, text: str | None = None):
        self.status_code = status_code
        self._text = text if text is not None else json.dumps(body)

    def json(self):
        return json.loads(self._text)


class FakeSession:
    """Stands in for DashboardSession; records requested URLs."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.urls = []

    def get(self, url: str, **kwargs):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.response


class StepClock:
    """Deterministic clock: each call advances one minute."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(minutes=1)
        return now


@pytest.fixture
def api_payload():
    """Minimal payload an API endpoint might return."""
    return {
        "donationsByYear": [
            {"year": 2022, "amount": 1000},
            {"year": 2023, "amount": 1500},
        ],
        "donationMix": [{"label": "Monthly", "value": 0.4}],
        "expensesByCategory": [{"label": "Programs", "value": 0.8}],
        "impactByYear": [],
        "projects": [],
        "partnerships": [],
        "risk": [],
    }


@pytest.fixture
def ok_session(api_payload):
    return FakeSession(FakeResponse(200, api_payload))


@pytest.fixture
def clock():
    return StepClock()
