"""
Converters: Database row format <-> domain models.

Provides bidirectional conversion between Supabase database rows and the
workout session domain models.

Database schema:
- workout_sessions: id, group_id, creator_id, session_date, started_at,
  ended_at, status, created_at
- workout_session_participants: id, workout_session_id, user_id,
  participant_index, joined_at
- workout_session_workout_types: id, workout_session_id, workout_type_id,
  station_index
- workout_interval_scores: id, participant_id, round_number, station_index,
  workout_type_id, score, weight, recorded_at

Timestamps are stored as ISO 8601 strings. Weights are stored as numeric and
may come back from PostgREST as int, float or string.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from domain.models import (
    WorkoutIntervalScore,
    WorkoutSession,
    WorkoutSessionParticipant,
    WorkoutSessionStatus,
    WorkoutSessionWorkoutType,
    ensure_utc,
)


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Parse datetime from various formats, normalizing to UTC."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, str):
        try:
            # Python < 3.11 does not accept the Z suffix
            if value.endswith("Z"):
                value = value[:-1] + "+00:00"
            return ensure_utc(datetime.fromisoformat(value))
        except ValueError:
            return None
    return None


def _format_datetime(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return ensure_utc(value).isoformat()


def _parse_weight(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


# =============================================================================
# Workout sessions
# =============================================================================


def db_row_to_session(row: Dict[str, Any]) -> WorkoutSession:
    """
    Convert a workout_sessions row to a WorkoutSession.

    Examples:
        >>> row = {
        ...     "id": "s1", "group_id": "g1", "creator_id": "u1",
        ...     "session_date": "2026-01-05T18:00:00Z",
        ...     "status": "active",
        ...     "started_at": "2026-01-05T18:02:11+00:00",
        ...     "created_at": "2026-01-01T09:00:00Z",
        ... }
        >>> db_row_to_session(row).status
        <WorkoutSessionStatus.ACTIVE: 'active'>
    """
    return WorkoutSession(
        id=str(row["id"]),
        group_id=str(row["group_id"]),
        creator_id=str(row["creator_id"]),
        session_date=_parse_datetime(row.get("session_date")),
        started_at=_parse_datetime(row.get("started_at")),
        ended_at=_parse_datetime(row.get("ended_at")),
        status=WorkoutSessionStatus(row.get("status") or WorkoutSessionStatus.PENDING.value),
        created_at=_parse_datetime(row.get("created_at")),
    )


def session_to_db_row(session: WorkoutSession) -> Dict[str, Any]:
    """
    Convert a WorkoutSession to a workout_sessions row.

    The id is omitted for unsaved sessions so the store assigns one.
    """
    row: Dict[str, Any] = {
        "group_id": session.group_id,
        "creator_id": session.creator_id,
        "session_date": _format_datetime(session.session_date),
        "started_at": _format_datetime(session.started_at),
        "ended_at": _format_datetime(session.ended_at),
        "status": session.status.value,
        "created_at": _format_datetime(session.created_at),
    }
    if session.id:
        row["id"] = session.id
    return row


def status_change_to_db_row(
    status: WorkoutSessionStatus,
    *,
    started_at: Optional[datetime] = None,
    ended_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Build the partial row written by a lifecycle transition.

    Only the fields the transition sets are included so the conditional
    update never clears a timestamp written earlier.
    """
    changes: Dict[str, Any] = {"status": status.value}
    if started_at is not None:
        changes["started_at"] = _format_datetime(started_at)
    if ended_at is not None:
        changes["ended_at"] = _format_datetime(ended_at)
    return changes


# =============================================================================
# Participants
# =============================================================================


def db_row_to_participant(row: Dict[str, Any]) -> WorkoutSessionParticipant:
    """Convert a workout_session_participants row to a participant."""
    return WorkoutSessionParticipant(
        id=str(row["id"]),
        workout_session_id=str(row["workout_session_id"]),
        user_id=str(row["user_id"]),
        participant_index=int(row["participant_index"]),
        joined_at=_parse_datetime(row.get("joined_at")),
    )


def participant_to_db_row(participant: WorkoutSessionParticipant) -> Dict[str, Any]:
    row: Dict[str, Any] = {
        "workout_session_id": participant.workout_session_id,
        "user_id": participant.user_id,
        "participant_index": participant.participant_index,
        "joined_at": _format_datetime(participant.joined_at),
    }
    if participant.id:
        row["id"] = participant.id
    return row


# =============================================================================
# Station plan
# =============================================================================


def db_row_to_station(row: Dict[str, Any]) -> WorkoutSessionWorkoutType:
    """Convert a workout_session_workout_types row to a station plan entry."""
    return WorkoutSessionWorkoutType(
        id=str(row["id"]),
        workout_session_id=str(row["workout_session_id"]),
        workout_type_id=str(row["workout_type_id"]),
        station_index=int(row["station_index"]),
    )


# =============================================================================
# Scores
# =============================================================================


def db_row_to_score(row: Dict[str, Any]) -> WorkoutIntervalScore:
    """Convert a workout_interval_scores row to a score."""
    return WorkoutIntervalScore(
        id=str(row["id"]),
        participant_id=str(row["participant_id"]),
        round_number=int(row["round_number"]),
        station_index=int(row["station_index"]),
        workout_type_id=str(row.get("workout_type_id") or ""),
        score=int(row["score"]),
        weight=_parse_weight(row.get("weight")),
        recorded_at=_parse_datetime(row.get("recorded_at")),
    )


def score_to_db_row(score: WorkoutIntervalScore) -> Dict[str, Any]:
    """
    Convert a score to a workout_interval_scores row.

    Weight is serialized as a string so no precision is lost in JSON.
    """
    row: Dict[str, Any] = {
        "participant_id": score.participant_id,
        "round_number": score.round_number,
        "station_index": score.station_index,
        "workout_type_id": score.workout_type_id,
        "score": score.score,
        "weight": str(score.weight) if score.weight is not None else None,
        "recorded_at": _format_datetime(score.recorded_at),
    }
    if score.id:
        row["id"] = score.id
    return row
