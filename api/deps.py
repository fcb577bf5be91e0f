"""
FastAPI Dependency Providers for the Family Fitness API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and use case providers create new instances per-request
- Auth provider validates the bearer token and provisions the user

Usage in routers:
    from api.deps import get_session_lifecycle, get_current_user

    @router.post("/sessions/{session_id}/start")
    def start_session(
        session_id: str,
        user_id: str = Depends(get_current_user),
        lifecycle: SessionLifecycleUseCase = Depends(get_session_lifecycle),
    ):
        return lifecycle.start_session(session_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_session_repo] = lambda: FakeWorkoutSessionRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    WorkoutSessionRepository,
    ParticipantRepository,
    StationPlanRepository,
    ScoreRepository,
    UserRepository,
    GroupRepository,
    WorkoutTypeRepository,
)

# Concrete implementations
from infrastructure import (
    SupabaseWorkoutSessionRepository,
    SupabaseParticipantRepository,
    SupabaseStationPlanRepository,
    SupabaseScoreRepository,
    SupabaseUserRepository,
    SupabaseGroupRepository,
    SupabaseWorkoutTypeRepository,
)

from application.use_cases import (
    GetSessionAssignmentsUseCase,
    ManageSessionUseCase,
    RecordScoreUseCase,
    SessionLifecycleUseCase,
)

from backend.settings import Settings, get_settings as _get_settings
from backend.auth import authenticate


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_session_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutSessionRepository:
    """Get workout session repository instance."""
    return SupabaseWorkoutSessionRepository(client)


def get_participant_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ParticipantRepository:
    """Get participant roster repository instance."""
    return SupabaseParticipantRepository(client)


def get_station_repo(
    client: Client = Depends(get_supabase_client_required),
) -> StationPlanRepository:
    """Get station plan repository instance."""
    return SupabaseStationPlanRepository(client)


def get_score_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ScoreRepository:
    """Get score repository instance."""
    return SupabaseScoreRepository(client)


def get_user_repo(
    client: Client = Depends(get_supabase_client_required),
) -> UserRepository:
    """Get user repository instance."""
    return SupabaseUserRepository(client)


def get_group_repo(
    client: Client = Depends(get_supabase_client_required),
) -> GroupRepository:
    """Get group lookup repository instance."""
    return SupabaseGroupRepository(client)


def get_workout_type_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutTypeRepository:
    """Get workout type catalog repository instance."""
    return SupabaseWorkoutTypeRepository(client)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_session_lifecycle(
    session_repo: WorkoutSessionRepository = Depends(get_session_repo),
    participant_repo: ParticipantRepository = Depends(get_participant_repo),
    station_repo: StationPlanRepository = Depends(get_station_repo),
    score_repo: ScoreRepository = Depends(get_score_repo),
    group_repo: GroupRepository = Depends(get_group_repo),
) -> SessionLifecycleUseCase:
    return SessionLifecycleUseCase(
        session_repo=session_repo,
        participant_repo=participant_repo,
        station_repo=station_repo,
        score_repo=score_repo,
        group_repo=group_repo,
    )


def get_session_assignments(
    session_repo: WorkoutSessionRepository = Depends(get_session_repo),
    participant_repo: ParticipantRepository = Depends(get_participant_repo),
    station_repo: StationPlanRepository = Depends(get_station_repo),
    user_repo: UserRepository = Depends(get_user_repo),
    workout_type_repo: WorkoutTypeRepository = Depends(get_workout_type_repo),
) -> GetSessionAssignmentsUseCase:
    return GetSessionAssignmentsUseCase(
        session_repo=session_repo,
        participant_repo=participant_repo,
        station_repo=station_repo,
        user_repo=user_repo,
        workout_type_repo=workout_type_repo,
    )


def get_manage_session(
    session_repo: WorkoutSessionRepository = Depends(get_session_repo),
    participant_repo: ParticipantRepository = Depends(get_participant_repo),
    station_repo: StationPlanRepository = Depends(get_station_repo),
    user_repo: UserRepository = Depends(get_user_repo),
    group_repo: GroupRepository = Depends(get_group_repo),
) -> ManageSessionUseCase:
    return ManageSessionUseCase(
        session_repo=session_repo,
        participant_repo=participant_repo,
        station_repo=station_repo,
        user_repo=user_repo,
        group_repo=group_repo,
    )


def get_record_score(
    session_repo: WorkoutSessionRepository = Depends(get_session_repo),
    participant_repo: ParticipantRepository = Depends(get_participant_repo),
    station_repo: StationPlanRepository = Depends(get_station_repo),
    score_repo: ScoreRepository = Depends(get_score_repo),
) -> RecordScoreUseCase:
    return RecordScoreUseCase(
        session_repo=session_repo,
        participant_repo=participant_repo,
        station_repo=station_repo,
        score_repo=score_repo,
    )


# =============================================================================
# Authentication Providers
# =============================================================================


def get_current_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
    user_repo: UserRepository = Depends(get_user_repo),
) -> str:
    """
    Get the current authenticated user's internal ID.

    Validates the bearer token and auto-provisions the user on first sight.

    Raises:
        HTTPException: 401 if authentication fails
    """
    return authenticate(authorization, settings, user_repo)


# =============================================================================
# Exports
# =============================================================================

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
