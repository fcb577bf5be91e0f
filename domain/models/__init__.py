"""
Domain models for the Family Fitness API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- WorkoutSession: The aggregate whose status drives the workout lifecycle
- WorkoutSessionParticipant: A user joined to a session, in join order
- WorkoutSessionWorkoutType: One station of a session's plan (1-4)
- WorkoutIntervalScore: A participant's result for one round at one station
- SessionAssignments: Read-only projection for the live-session screen

Usage:
    >>> from domain.models import WorkoutSession, WorkoutSessionStatus

    >>> session = WorkoutSession(
    ...     id="s1", group_id="g1", creator_id="u1",
    ...     session_date=datetime(2026, 1, 5, 18, 0),
    ... )
    >>> session.status is WorkoutSessionStatus.PENDING
    True
"""

from domain.models.assignments import (
    UNKNOWN_USER_NAME,
    ParticipantAssignment,
    SessionAssignments,
    StationAssignment,
)
from domain.models.participant import WorkoutSessionParticipant
from domain.models.score import ROUNDS, WorkoutIntervalScore
from domain.models.station import (
    MAX_STATION_INDEX,
    MIN_STATION_INDEX,
    WorkoutSessionWorkoutType,
)
from domain.models.workout_session import (
    WorkoutSession,
    WorkoutSessionStatus,
    ensure_utc,
)

__all__ = [
    # Main entities
    "WorkoutSession",
    "WorkoutSessionParticipant",
    "WorkoutSessionWorkoutType",
    "WorkoutIntervalScore",
    # Projections
    "SessionAssignments",
    "ParticipantAssignment",
    "StationAssignment",
    # Enums
    "WorkoutSessionStatus",
    # Constants and helpers
    "ROUNDS",
    "MIN_STATION_INDEX",
    "MAX_STATION_INDEX",
    "UNKNOWN_USER_NAME",
    "ensure_utc",
]
