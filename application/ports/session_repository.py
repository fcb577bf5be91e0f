"""
Workout Session Repository Interfaces (Ports).

This module defines the abstract interfaces for session persistence: the
session record itself, its participant roster and its station plan.
Rows are plain dicts in the database shape; use cases convert them with
domain.converters.
"""
from typing import Protocol, Optional, List, Dict, Any


class WorkoutSessionRepository(Protocol):
    """
    Abstract interface for workout session persistence.

    Status and timestamp columns are only written through update_if_status,
    which the lifecycle use case uses as a compare-and-swap on the prior
    status.
    """

    def get(self, session_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a session by ID.

        Returns:
            Session row or None if not found
        """
        ...

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new session.

        Args:
            data: Row without an id; the store assigns one

        Returns:
            The stored row including its id
        """
        ...

    def update(self, session_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Apply a partial update to a session.

        Returns:
            Updated row or None if the session does not exist
        """
        ...

    def update_if_status(
        self,
        session_id: str,
        expected_status: str,
        changes: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Apply changes only if the stored status still equals expected_status.

        Args:
            session_id: Session ID
            expected_status: Status value observed before the transition
            changes: Columns to write

        Returns:
            Updated row, or None if no row matched (session missing or its
            status changed concurrently)
        """
        ...

    def find_active_by_group(self, group_id: str) -> Optional[Dict[str, Any]]:
        """
        Get the Active session with the latest started_at for a group.

        Returns:
            Session row or None if the group has no Active session
        """
        ...

    def list_by_group(self, group_id: str) -> List[Dict[str, Any]]:
        """
        List a group's sessions, newest session_date first.
        """
        ...

    def delete(self, session_id: str) -> bool:
        """
        Delete a session.

        Returns:
            True if deleted, False if not found
        """
        ...


class ParticipantRepository(Protocol):
    """
    Abstract interface for the session participant roster.
    """

    def list_by_session(self, session_id: str) -> List[Dict[str, Any]]:
        """
        List a session's participants ordered by participant_index.
        """
        ...

    def get(self, participant_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a participant by ID.

        Returns:
            Participant row or None if not found
        """
        ...

    def get_by_session_and_user(
        self,
        session_id: str,
        user_id: str,
    ) -> Optional[Dict[str, Any]]:
        """
        Get a user's participant entry for a session, if they joined.
        """
        ...

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Add a participant to a session's roster.

        Raises:
            ParticipantAlreadyJoinedError: (session, user) or
                (session, participant_index) already exists
        """
        ...


class StationPlanRepository(Protocol):
    """
    Abstract interface for a session's station plan (station -> workout type).
    """

    def list_by_session(self, session_id: str) -> List[Dict[str, Any]]:
        """
        List a session's station plan entries ordered by station_index.
        """
        ...

    def upsert(
        self,
        session_id: str,
        station_index: int,
        workout_type_id: str,
    ) -> Dict[str, Any]:
        """
        Set the workout type for one station, replacing any previous entry.

        Returns:
            The stored plan entry row
        """
        ...
