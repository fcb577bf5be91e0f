"""
Domain layer for the Family Fitness API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    ParticipantAssignment,
    SessionAssignments,
    StationAssignment,
    WorkoutIntervalScore,
    WorkoutSession,
    WorkoutSessionParticipant,
    WorkoutSessionStatus,
    WorkoutSessionWorkoutType,
)

__all__ = [
    "WorkoutSession",
    "WorkoutSessionStatus",
    "WorkoutSessionParticipant",
    "WorkoutSessionWorkoutType",
    "WorkoutIntervalScore",
    "SessionAssignments",
    "ParticipantAssignment",
    "StationAssignment",
]
