"""
Group-scoped session queries.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_current_user, get_manage_session, get_session_lifecycle
from api.routers.errors import APPLICATION_ERRORS, http_error
from application.use_cases import ManageSessionUseCase, SessionLifecycleUseCase
from domain.models import WorkoutSession

router = APIRouter(
    prefix="/groups",
    tags=["Sessions"],
)


@router.get("/{group_id}/sessions", response_model=List[WorkoutSession])
def list_group_sessions(
    group_id: str,
    user_id: str = Depends(get_current_user),
    manage: ManageSessionUseCase = Depends(get_manage_session),
):
    """List a group's sessions, newest first."""
    try:
        return manage.list_sessions_for_group(group_id)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e


@router.get("/{group_id}/sessions/active", response_model=WorkoutSession)
def get_active_session(
    group_id: str,
    user_id: str = Depends(get_current_user),
    lifecycle: SessionLifecycleUseCase = Depends(get_session_lifecycle),
):
    """
    Get the group's currently Active session.

    Returns 404 when the group does not exist or has no Active session.
    """
    try:
        session = lifecycle.get_active_session_for_group(group_id)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e
    if session is None:
        raise HTTPException(status_code=404, detail=f"No active session for group {group_id}")
    return session
