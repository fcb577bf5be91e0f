"""
Supabase implementation of the workout session repositories.

This module implements WorkoutSessionRepository, ParticipantRepository and
StationPlanRepository with a constructor-injected Supabase client.

Tables:
- workout_sessions
- workout_session_participants (unique: session+user, session+participant_index)
- workout_session_workout_types (unique: session+station_index)
"""
import logging
from typing import Optional, List, Dict, Any

from postgrest.exceptions import APIError
from supabase import Client

from application.exceptions import ParticipantAlreadyJoinedError, ParticipantIndexConflictError

logger = logging.getLogger(__name__)

# Postgres error code for unique_violation
UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: APIError) -> bool:
    return getattr(error, "code", None) == UNIQUE_VIOLATION


def violates_column(error: APIError, column: str) -> bool:
    """Whether a constraint error names the column in its message or details."""
    text = f"{getattr(error, 'message', '') or ''} {getattr(error, 'details', '') or ''}"
    return column in text


class SupabaseWorkoutSessionRepository:
    """
    Supabase implementation of WorkoutSessionRepository protocol.

    Lifecycle transitions go through update_if_status, which adds the
    expected status to the WHERE clause so only one writer can win.
    """

    TABLE = "workout_sessions"

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get(self, session_id: str) -> Optional[Dict[str, Any]]:
        result = self._client.table(self.TABLE).select("*").eq("id", session_id).limit(1).execute()
        if result.data:
            return result.data[0]
        return None

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            result = self._client.table(self.TABLE).insert(data).execute()
        except APIError as e:
            logger.exception(f"Failed to create session for group {data.get('group_id')}: {e}")
            raise
        return result.data[0]

    def update(self, session_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        result = self._client.table(self.TABLE).update(changes).eq("id", session_id).execute()
        if result.data:
            return result.data[0]
        return None

    def update_if_status(
        self,
        session_id: str,
        expected_status: str,
        changes: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        result = (
            self._client.table(self.TABLE)
            .update(changes)
            .eq("id", session_id)
            .eq("status", expected_status)
            .execute()
        )
        if result.data:
            return result.data[0]
        logger.info(f"Conditional update of session {session_id} matched no row (expected {expected_status})")
        return None

    def find_active_by_group(self, group_id: str) -> Optional[Dict[str, Any]]:
        result = (
            self._client.table(self.TABLE)
            .select("*")
            .eq("group_id", group_id)
            .eq("status", "active")
            .order("started_at", desc=True)
            .limit(1)
            .execute()
        )
        if result.data:
            return result.data[0]
        return None

    def list_by_group(self, group_id: str) -> List[Dict[str, Any]]:
        result = (
            self._client.table(self.TABLE)
            .select("*")
            .eq("group_id", group_id)
            .order("session_date", desc=True)
            .execute()
        )
        return result.data or []

    def delete(self, session_id: str) -> bool:
        result = self._client.table(self.TABLE).delete().eq("id", session_id).execute()
        deleted = bool(result.data)
        if deleted:
            logger.info(f"Session {session_id} deleted")
        return deleted


class SupabaseParticipantRepository:
    """
    Supabase implementation of ParticipantRepository protocol.
    """

    TABLE = "workout_session_participants"

    def __init__(self, client: Client):
        self._client = client

    def list_by_session(self, session_id: str) -> List[Dict[str, Any]]:
        result = (
            self._client.table(self.TABLE)
            .select("*")
            .eq("workout_session_id", session_id)
            .order("participant_index")
            .execute()
        )
        return result.data or []

    def get(self, participant_id: str) -> Optional[Dict[str, Any]]:
        result = self._client.table(self.TABLE).select("*").eq("id", participant_id).limit(1).execute()
        if result.data:
            return result.data[0]
        return None

    def get_by_session_and_user(
        self,
        session_id: str,
        user_id: str,
    ) -> Optional[Dict[str, Any]]:
        result = (
            self._client.table(self.TABLE)
            .select("*")
            .eq("workout_session_id", session_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if result.data:
            return result.data[0]
        return None

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            result = self._client.table(self.TABLE).insert(data).execute()
        except APIError as e:
            if is_unique_violation(e) and violates_column(e, "participant_index"):
                raise ParticipantIndexConflictError(
                    data["workout_session_id"], data["participant_index"]
                ) from e
            if is_unique_violation(e):
                raise ParticipantAlreadyJoinedError(
                    data["workout_session_id"], data["user_id"]
                ) from e
            logger.exception(f"Failed to add participant to session {data.get('workout_session_id')}: {e}")
            raise
        return result.data[0]


class SupabaseStationPlanRepository:
    """
    Supabase implementation of StationPlanRepository protocol.
    """

    TABLE = "workout_session_workout_types"

    def __init__(self, client: Client):
        self._client = client

    def list_by_session(self, session_id: str) -> List[Dict[str, Any]]:
        result = (
            self._client.table(self.TABLE)
            .select("*")
            .eq("workout_session_id", session_id)
            .order("station_index")
            .execute()
        )
        return result.data or []

    def upsert(
        self,
        session_id: str,
        station_index: int,
        workout_type_id: str,
    ) -> Dict[str, Any]:
        data = {
            "workout_session_id": session_id,
            "station_index": station_index,
            "workout_type_id": workout_type_id,
        }
        result = (
            self._client.table(self.TABLE)
            .upsert(data, on_conflict="workout_session_id,station_index")
            .execute()
        )
        return result.data[0]
