"""
API package for the Family Fitness API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- schemas/: Request and response models
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_session_repo,
    get_participant_repo,
    get_station_repo,
    get_score_repo,
    get_user_repo,
    get_group_repo,
    get_workout_type_repo,
    get_session_lifecycle,
    get_session_assignments,
    get_manage_session,
    get_record_score,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_session_repo",
    "get_participant_repo",
    "get_station_repo",
    "get_score_repo",
    "get_user_repo",
    "get_group_repo",
    "get_workout_type_repo",
    # Use cases
    "get_session_lifecycle",
    "get_session_assignments",
    "get_manage_session",
    "get_record_score",
    # Authentication
    "get_current_user",
]
