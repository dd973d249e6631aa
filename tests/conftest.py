from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from services import ReviewState, SetSample, new_review_state


@pytest.fixture
def today():
    return date(2025, 5, 20)


@pytest.fixture
def fresh_state(today):
    return new_review_state(today)


@pytest.fixture
def mature_state(today):
    return ReviewState(
        repetition_count=2,
        easiness_factor=2.5,
        interval_days=6,
        next_review_on=today,
    )


@pytest.fixture
def make_sessions():
    """Build one single-set session per weight on consecutive days."""
    def _make(weights, reps=5, start=date(2025, 1, 1)):
        return [
            SetSample(
                session_id=f"w{i}",
                session_date=start + timedelta(days=i),
                weight=weight,
                reps=reps,
            )
            for i, weight in enumerate(weights)
        ]
    return _make


@pytest.fixture
def client():
    from main import app
    return TestClient(app)
