"""
Pytest fixtures shared by unit and integration tests.
"""

from datetime import datetime, timedelta, timezone
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api.deps import get_current_user
from application.use_cases import (
    GetSessionAssignmentsUseCase,
    ManageSessionUseCase,
    RecordScoreUseCase,
    SessionLifecycleUseCase,
)
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import DEFAULT_CREATOR_ID, FakeRepositories
from tests.fakes.conftest import override_with_fakes, reset_overrides


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------


class FixedClock:
    """Deterministic clock; advance() moves it forward."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2026, 1, 5, 18, 0, tzinfo=timezone.utc))


# ---------------------------------------------------------------------------
# Fakes and use cases
# ---------------------------------------------------------------------------


@pytest.fixture
def repos() -> FakeRepositories:
    return FakeRepositories()


@pytest.fixture
def lifecycle(repos, clock) -> SessionLifecycleUseCase:
    return SessionLifecycleUseCase(
        session_repo=repos.sessions,
        participant_repo=repos.participants,
        station_repo=repos.stations,
        score_repo=repos.scores,
        group_repo=repos.groups,
        clock=clock,
    )


@pytest.fixture
def assignments(repos) -> GetSessionAssignmentsUseCase:
    return GetSessionAssignmentsUseCase(
        session_repo=repos.sessions,
        participant_repo=repos.participants,
        station_repo=repos.stations,
        user_repo=repos.users,
        workout_type_repo=repos.workout_types,
    )


@pytest.fixture
def manage(repos, clock) -> ManageSessionUseCase:
    return ManageSessionUseCase(
        session_repo=repos.sessions,
        participant_repo=repos.participants,
        station_repo=repos.stations,
        user_repo=repos.users,
        group_repo=repos.groups,
        clock=clock,
    )


@pytest.fixture
def record(repos, clock) -> RecordScoreUseCase:
    return RecordScoreUseCase(
        session_repo=repos.sessions,
        participant_repo=repos.participants,
        station_repo=repos.stations,
        score_repo=repos.scores,
        clock=clock,
    )


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------

TEST_USER_ID = DEFAULT_CREATOR_ID


def mock_get_current_user() -> str:
    """Mock auth dependency that returns the seeded creator."""
    return TEST_USER_ID


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def api_client(app, repos) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient backed by in-memory fakes.
    Properly cleans up dependency overrides after each test.
    """
    override_with_fakes(app, repos)
    app.dependency_overrides[get_current_user] = mock_get_current_user
    yield TestClient(app)
    reset_overrides(app)
