"""
Pytest fixtures for Workout Store API tests.

Provides:
- Test settings and app instances built with create_app()
- TestClient fixtures with the workout repository swapped for an in-memory fake
- Command line options for the opt-in live suite (tests/e2e)
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api.deps import get_workout_repo
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeWorkoutRepository


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Run tests against a live API (requires the service and MongoDB running)",
    )
    parser.addoption(
        "--api-url",
        action="store",
        default="http://127.0.0.1:8000",
        help="Base URL for the workout store service",
    )


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        mongodb_uri="mongodb://localhost:27017",
        _env_file=None,
    )


@pytest.fixture
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def fake_workout_repo() -> FakeWorkoutRepository:
    """Empty in-memory workout repository."""
    return FakeWorkoutRepository()


@pytest.fixture
def client(app, fake_workout_repo) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient backed by the fake repository.

    The lifespan is not entered, so no MongoDB connection is attempted.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_workout_repo] = lambda: fake_workout_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Domain Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def squat_payload() -> dict:
    """Valid payload for creating a workout."""
    return {"title": "Squat", "reps": 5, "load": 100}
