"""
Application Use Cases for the Family Fitness API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import SessionLifecycleUseCase

    lifecycle = SessionLifecycleUseCase(
        session_repo=session_repo,
        participant_repo=participant_repo,
        station_repo=station_repo,
        score_repo=score_repo,
        group_repo=group_repo,
    )
    session = lifecycle.complete_session("session-123")
"""

from application.use_cases.manage_session import ManageSessionUseCase
from application.use_cases.record_score import RecordScoreUseCase
from application.use_cases.score_completion import (
    ScoreCompletion,
    ScoreCompletionResult,
)
from application.use_cases.session_assignments import GetSessionAssignmentsUseCase
from application.use_cases.session_lifecycle import SessionLifecycleUseCase, utc_now

__all__ = [
    # Lifecycle
    "SessionLifecycleUseCase",
    "ScoreCompletion",
    "ScoreCompletionResult",
    "utc_now",
    # Read model
    "GetSessionAssignmentsUseCase",
    # Management
    "ManageSessionUseCase",
    "RecordScoreUseCase",
]
