"""
Supabase implementation of ScoreRepository.

Scores live in workout_interval_scores with a unique index on
(participant_id, round_number, station_index). A unique violation on insert
is surfaced as DuplicateScoreError so callers do not depend on PostgREST.
"""
import logging
from typing import Optional, List, Dict, Any

from postgrest.exceptions import APIError
from supabase import Client

from application.exceptions import DuplicateScoreError
from infrastructure.db.session_repository import is_unique_violation

logger = logging.getLogger(__name__)


class SupabaseScoreRepository:
    """
    Supabase implementation of ScoreRepository protocol.
    """

    TABLE = "workout_interval_scores"

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def list_by_participant(self, participant_id: str) -> List[Dict[str, Any]]:
        result = (
            self._client.table(self.TABLE)
            .select("*")
            .eq("participant_id", participant_id)
            .order("round_number")
            .order("station_index")
            .execute()
        )
        return result.data or []

    def list_by_participants(self, participant_ids: List[str]) -> List[Dict[str, Any]]:
        if not participant_ids:
            return []
        result = (
            self._client.table(self.TABLE)
            .select("*")
            .in_("participant_id", participant_ids)
            .execute()
        )
        return result.data or []

    def list_by_workout_type(self, workout_type_id: str) -> List[Dict[str, Any]]:
        result = (
            self._client.table(self.TABLE)
            .select("*")
            .eq("workout_type_id", workout_type_id)
            .order("recorded_at")
            .execute()
        )
        return result.data or []

    def get(self, score_id: str) -> Optional[Dict[str, Any]]:
        result = self._client.table(self.TABLE).select("*").eq("id", score_id).limit(1).execute()
        if result.data:
            return result.data[0]
        return None

    def insert(self, data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            result = self._client.table(self.TABLE).insert(data).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise DuplicateScoreError(
                    data["participant_id"], data["round_number"], data["station_index"]
                ) from e
            logger.exception(f"Failed to insert score for participant {data.get('participant_id')}: {e}")
            raise
        return result.data[0]

    def update(self, score_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        result = self._client.table(self.TABLE).update(changes).eq("id", score_id).execute()
        if result.data:
            return result.data[0]
        return None
