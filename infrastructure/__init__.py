"""
Infrastructure Layer for the Family Fitness API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseWorkoutSessionRepository,
    SupabaseParticipantRepository,
    SupabaseStationPlanRepository,
    SupabaseScoreRepository,
    SupabaseUserRepository,
    SupabaseGroupRepository,
    SupabaseWorkoutTypeRepository,
)

__all__ = [
    "SupabaseWorkoutSessionRepository",
    "SupabaseParticipantRepository",
    "SupabaseStationPlanRepository",
    "SupabaseScoreRepository",
    "SupabaseUserRepository",
    "SupabaseGroupRepository",
    "SupabaseWorkoutTypeRepository",
]
