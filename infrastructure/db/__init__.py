"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into use cases
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseWorkoutSessionRepository,
        SupabaseParticipantRepository,
        SupabaseStationPlanRepository,
        SupabaseScoreRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    session_repo = SupabaseWorkoutSessionRepository(client)
    score_repo = SupabaseScoreRepository(client)
"""

from infrastructure.db.session_repository import (
    SupabaseWorkoutSessionRepository,
    SupabaseParticipantRepository,
    SupabaseStationPlanRepository,
)
from infrastructure.db.score_repository import SupabaseScoreRepository
from infrastructure.db.directory_repository import (
    SupabaseUserRepository,
    SupabaseGroupRepository,
    SupabaseWorkoutTypeRepository,
)

__all__ = [
    # Sessions, roster and station plan
    "SupabaseWorkoutSessionRepository",
    "SupabaseParticipantRepository",
    "SupabaseStationPlanRepository",

    # Scores
    "SupabaseScoreRepository",

    # Directory lookups
    "SupabaseUserRepository",
    "SupabaseGroupRepository",
    "SupabaseWorkoutTypeRepository",
]
