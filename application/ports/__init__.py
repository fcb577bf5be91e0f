"""
Repository Interfaces (Ports) for the Family Fitness API.

This package defines abstract interfaces that decouple the session lifecycle
and scoring logic from infrastructure (database, identity provider).
Implementations are provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use cases need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutSessionRepository, ScoreRepository

    class SessionLifecycleUseCase:
        def __init__(self, session_repo: WorkoutSessionRepository, ...):
            self._session_repo = session_repo
"""

# Session, roster and station plan persistence
from application.ports.session_repository import (
    WorkoutSessionRepository,
    ParticipantRepository,
    StationPlanRepository,
)

# Score persistence
from application.ports.score_repository import ScoreRepository

# Users, groups and workout type catalog
from application.ports.directory_repository import (
    UserRepository,
    GroupRepository,
    WorkoutTypeRepository,
)

__all__ = [
    # Session
    "WorkoutSessionRepository",
    "ParticipantRepository",
    "StationPlanRepository",
    # Scores
    "ScoreRepository",
    # Directory
    "UserRepository",
    "GroupRepository",
    "WorkoutTypeRepository",
]
