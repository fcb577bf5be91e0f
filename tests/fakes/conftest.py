"""
Test Fixtures and Helpers for Fake Repositories.

This module provides helpers for overriding FastAPI dependencies with fake
repository implementations.

Usage:
    from tests.fakes import FakeRepositories
    from tests.fakes.conftest import override_with_fakes, reset_overrides

    def test_something(app):
        repos = FakeRepositories()
        override_with_fakes(app, repos)

        # Now the API will use your fakes
        response = client.get("/sessions/s1")

        reset_overrides(app)
"""

from typing import Any, Callable

from fastapi import FastAPI

from api import deps
from tests.fakes import FakeRepositories

# Type for repository dependency getters
RepoGetter = Callable[..., Any]


def reset_overrides(app: FastAPI) -> None:
    """
    Reset all FastAPI dependency overrides.

    Call this in test setup/teardown to ensure clean state.
    """
    app.dependency_overrides.clear()


def override_dependency(app: FastAPI, getter: RepoGetter, implementation: Any) -> None:
    """
    Override a FastAPI dependency with a fake implementation.

    Args:
        app: Application whose overrides are changed
        getter: The dependency getter function (e.g., get_session_repo)
        implementation: The fake implementation instance
    """
    app.dependency_overrides[getter] = lambda: implementation


def override_with_fakes(app: FastAPI, repos: FakeRepositories) -> FakeRepositories:
    """
    Route every repository provider in api.deps to the matching fake.

    Use case providers are left in place so they are built from the fakes.

    Returns:
        The same FakeRepositories (for seeding data etc.)
    """
    override_dependency(app, deps.get_session_repo, repos.sessions)
    override_dependency(app, deps.get_participant_repo, repos.participants)
    override_dependency(app, deps.get_station_repo, repos.stations)
    override_dependency(app, deps.get_score_repo, repos.scores)
    override_dependency(app, deps.get_user_repo, repos.users)
    override_dependency(app, deps.get_group_repo, repos.groups)
    override_dependency(app, deps.get_workout_type_repo, repos.workout_types)
    return repos
