"""
Workout sessions router.

Endpoints for scheduling sessions, driving their lifecycle
(start/cancel/complete), reading the live assignment view and managing the
roster and station plan.

Status and lifecycle timestamps are only changed through the transition
endpoints; PATCH /sessions/{id} accepts session_date only.
"""

from typing import List

from fastapi import APIRouter, Depends, Response

from api.deps import (
    get_current_user,
    get_manage_session,
    get_record_score,
    get_session_assignments,
    get_session_lifecycle,
)
from api.routers.errors import APPLICATION_ERRORS, http_error
from api.schemas import (
    AssignStationRequest,
    JoinSessionRequest,
    RescheduleSessionRequest,
    ScheduleSessionRequest,
)
from application.use_cases import (
    GetSessionAssignmentsUseCase,
    ManageSessionUseCase,
    RecordScoreUseCase,
    SessionLifecycleUseCase,
)
from domain.models import (
    SessionAssignments,
    WorkoutIntervalScore,
    WorkoutSession,
    WorkoutSessionParticipant,
    WorkoutSessionWorkoutType,
)

router = APIRouter(
    prefix="/sessions",
    tags=["Sessions"],
)


# =============================================================================
# Session CRUD
# =============================================================================


@router.post("", response_model=WorkoutSession, status_code=201)
def schedule_session(
    request: ScheduleSessionRequest,
    user_id: str = Depends(get_current_user),
    manage: ManageSessionUseCase = Depends(get_manage_session),
):
    """
    Schedule a new session for a group. The caller becomes its creator.
    """
    try:
        return manage.schedule_session(request.group_id, user_id, request.session_date)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e


@router.get("/{session_id}", response_model=WorkoutSession)
def get_session(
    session_id: str,
    user_id: str = Depends(get_current_user),
    manage: ManageSessionUseCase = Depends(get_manage_session),
):
    try:
        return manage.get_session(session_id)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e


@router.patch("/{session_id}", response_model=WorkoutSession)
def reschedule_session(
    session_id: str,
    request: RescheduleSessionRequest,
    user_id: str = Depends(get_current_user),
    manage: ManageSessionUseCase = Depends(get_manage_session),
):
    """
    Change a session's date.

    Unknown fields (status, started_at, ended_at, ...) are rejected with 422.
    """
    try:
        return manage.reschedule_session(session_id, request.session_date)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e


@router.delete("/{session_id}", status_code=204)
def delete_session(
    session_id: str,
    user_id: str = Depends(get_current_user),
    manage: ManageSessionUseCase = Depends(get_manage_session),
):
    try:
        manage.delete_session(session_id)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e
    return Response(status_code=204)


# =============================================================================
# Lifecycle
# =============================================================================


@router.post("/{session_id}/start", response_model=WorkoutSession)
def start_session(
    session_id: str,
    user_id: str = Depends(get_current_user),
    lifecycle: SessionLifecycleUseCase = Depends(get_session_lifecycle),
):
    """
    Start a Pending session.

    Returns 400 if the session is not Pending, 404 if it does not exist.
    """
    try:
        return lifecycle.start_session(session_id)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e


@router.post("/{session_id}/cancel", response_model=WorkoutSession)
def cancel_session(
    session_id: str,
    user_id: str = Depends(get_current_user),
    lifecycle: SessionLifecycleUseCase = Depends(get_session_lifecycle),
):
    """
    Cancel a Pending or Active session and zero-fill missing scores.
    """
    try:
        return lifecycle.cancel_session(session_id)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e


@router.post("/{session_id}/complete", response_model=WorkoutSession)
def complete_session(
    session_id: str,
    user_id: str = Depends(get_current_user),
    lifecycle: SessionLifecycleUseCase = Depends(get_session_lifecycle),
):
    """
    Complete an Active session and zero-fill missing scores.
    """
    try:
        return lifecycle.complete_session(session_id)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e


@router.get("/{session_id}/assignments", response_model=SessionAssignments)
def get_assignments(
    session_id: str,
    user_id: str = Depends(get_current_user),
    assignments: GetSessionAssignmentsUseCase = Depends(get_session_assignments),
):
    """
    Session status with participants and stations for the live-session screen.
    """
    try:
        return assignments.execute(session_id)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e


# =============================================================================
# Roster
# =============================================================================


@router.post(
    "/{session_id}/participants",
    response_model=WorkoutSessionParticipant,
    status_code=201,
)
def join_session(
    session_id: str,
    request: JoinSessionRequest,
    user_id: str = Depends(get_current_user),
    manage: ManageSessionUseCase = Depends(get_manage_session),
):
    try:
        return manage.join_session(session_id, request.user_id or user_id)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e


@router.get("/{session_id}/participants", response_model=List[WorkoutSessionParticipant])
def list_participants(
    session_id: str,
    user_id: str = Depends(get_current_user),
    manage: ManageSessionUseCase = Depends(get_manage_session),
):
    try:
        return manage.list_participants(session_id)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e


# =============================================================================
# Station plan
# =============================================================================


@router.put(
    "/{session_id}/stations/{station_index}",
    response_model=WorkoutSessionWorkoutType,
)
def assign_station(
    session_id: str,
    station_index: int,
    request: AssignStationRequest,
    user_id: str = Depends(get_current_user),
    manage: ManageSessionUseCase = Depends(get_manage_session),
):
    try:
        return manage.assign_station(session_id, station_index, request.workout_type_id)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e


@router.get("/{session_id}/stations", response_model=List[WorkoutSessionWorkoutType])
def list_stations(
    session_id: str,
    user_id: str = Depends(get_current_user),
    manage: ManageSessionUseCase = Depends(get_manage_session),
):
    try:
        return manage.list_stations(session_id)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e


# =============================================================================
# Scores
# =============================================================================


@router.get("/{session_id}/scores", response_model=List[WorkoutIntervalScore])
def list_session_scores(
    session_id: str,
    user_id: str = Depends(get_current_user),
    record: RecordScoreUseCase = Depends(get_record_score),
):
    try:
        return record.list_session_scores(session_id)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e
