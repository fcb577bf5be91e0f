"""
Score Repository Interface (Port).

This module defines the abstract interface for workout interval score
persistence. The store enforces uniqueness of
(participant_id, round_number, station_index).
"""
from typing import Protocol, Optional, List, Dict, Any


class ScoreRepository(Protocol):
    """
    Abstract interface for per-round, per-station score persistence.
    """

    def list_by_participant(self, participant_id: str) -> List[Dict[str, Any]]:
        """
        List all scores recorded for a participant.
        """
        ...

    def list_by_participants(self, participant_ids: List[str]) -> List[Dict[str, Any]]:
        """
        List all scores for a set of participants (one session's roster).

        Returns:
            Score rows in no particular order; empty list for no ids
        """
        ...

    def list_by_workout_type(self, workout_type_id: str) -> List[Dict[str, Any]]:
        """
        List all scores recorded under a workout type across sessions.

        Returns:
            Score rows ordered by recorded_at
        """
        ...

    def get(self, score_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a score by ID.

        Returns:
            Score row or None if not found
        """
        ...

    def insert(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new score.

        Raises:
            DuplicateScoreError: a score already exists for the
                (participant, round, station) triple
        """
        ...

    def update(self, score_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Update score and/or weight of an existing score.

        Returns:
            Updated row or None if not found
        """
        ...
