"""
Assignment view for the live-session screen.

Builds a read-only projection of a session: its status, the roster in join
order and the station plan in station order. User names and workout type
details are display enrichment; a lookup that misses or fails falls back to a
placeholder instead of failing the request.
"""

import logging
from typing import Optional, Tuple

from application.exceptions import SessionNotFoundError
from application.ports import (
    ParticipantRepository,
    StationPlanRepository,
    UserRepository,
    WorkoutSessionRepository,
    WorkoutTypeRepository,
)
from domain.converters import db_row_to_participant, db_row_to_session, db_row_to_station
from domain.models import (
    UNKNOWN_USER_NAME,
    ParticipantAssignment,
    SessionAssignments,
    StationAssignment,
)

logger = logging.getLogger(__name__)


class GetSessionAssignmentsUseCase:
    """
    Use case for reading a session's participant and station assignments.

    Works at every status, including Pending (preview) and after the session
    ended (history).
    """

    def __init__(
        self,
        session_repo: WorkoutSessionRepository,
        participant_repo: ParticipantRepository,
        station_repo: StationPlanRepository,
        user_repo: UserRepository,
        workout_type_repo: WorkoutTypeRepository,
    ) -> None:
        self._session_repo = session_repo
        self._participant_repo = participant_repo
        self._station_repo = station_repo
        self._user_repo = user_repo
        self._workout_type_repo = workout_type_repo

    def execute(self, session_id: str) -> SessionAssignments:
        """
        Build the assignment view for a session.

        Raises:
            SessionNotFoundError: session does not exist
        """
        row = self._session_repo.get(session_id)
        if row is None:
            raise SessionNotFoundError(session_id)
        session = db_row_to_session(row)

        participants = sorted(
            (db_row_to_participant(r) for r in self._participant_repo.list_by_session(session_id)),
            key=lambda p: p.participant_index,
        )
        stations = sorted(
            (db_row_to_station(r) for r in self._station_repo.list_by_session(session_id)),
            key=lambda s: s.station_index,
        )

        participant_views = [
            ParticipantAssignment(
                participant_id=p.id,
                user_id=p.user_id,
                user_name=self._user_name(p.user_id),
                participant_index=p.participant_index,
            )
            for p in participants
        ]

        station_views = []
        for station in stations:
            name, description = self._workout_type_display(station.workout_type_id)
            station_views.append(
                StationAssignment(
                    station_index=station.station_index,
                    workout_type_id=station.workout_type_id,
                    workout_type_name=name,
                    workout_type_description=description,
                )
            )

        return SessionAssignments(
            session_id=session.id,
            status=session.status,
            participants=participant_views,
            stations=station_views,
        )

    def _user_name(self, user_id: str) -> str:
        try:
            user = self._user_repo.get(user_id)
        except Exception as e:
            logger.warning(f"User lookup failed for {user_id}: {e}")
            return UNKNOWN_USER_NAME
        if not user or not user.get("username"):
            logger.warning(f"User {user_id} not found; using placeholder name")
            return UNKNOWN_USER_NAME
        return user["username"]

    def _workout_type_display(self, workout_type_id: str) -> Tuple[str, Optional[str]]:
        try:
            workout_type = self._workout_type_repo.get(workout_type_id)
        except Exception as e:
            logger.warning(f"Workout type lookup failed for {workout_type_id}: {e}")
            return workout_type_id, None
        if not workout_type or not workout_type.get("name"):
            logger.warning(f"Workout type {workout_type_id} not found; using raw id")
            return workout_type_id, None
        return workout_type["name"], workout_type.get("description")
