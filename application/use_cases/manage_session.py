"""
ManageSession use case.

Scheduling, roster and station plan operations for workout sessions. None of
these touch a session's status or lifecycle timestamps; those belong to
SessionLifecycleUseCase.
"""

import logging
from datetime import datetime
from typing import Callable, List

from application.exceptions import (
    GroupNotFoundError,
    ParticipantAlreadyJoinedError,
    ParticipantIndexConflictError,
    SessionClosedError,
    SessionNotFoundError,
    StationValidationError,
    UserNotFoundError,
)
from application.ports import (
    GroupRepository,
    ParticipantRepository,
    StationPlanRepository,
    UserRepository,
    WorkoutSessionRepository,
)
from application.use_cases.session_lifecycle import utc_now
from domain.converters import (
    db_row_to_participant,
    db_row_to_session,
    db_row_to_station,
    participant_to_db_row,
    session_to_db_row,
)
from domain.models import (
    MAX_STATION_INDEX,
    MIN_STATION_INDEX,
    WorkoutSession,
    WorkoutSessionParticipant,
    WorkoutSessionStatus,
    WorkoutSessionWorkoutType,
    ensure_utc,
)

logger = logging.getLogger(__name__)

# Attempts at taking the next participant index when joins race
JOIN_ATTEMPTS = 3


class ManageSessionUseCase:
    """
    Use case for scheduling sessions and managing their roster and stations.

    Usage:
        >>> manage = ManageSessionUseCase(
        ...     session_repo=session_repo,
        ...     participant_repo=participant_repo,
        ...     station_repo=station_repo,
        ...     user_repo=user_repo,
        ...     group_repo=group_repo,
        ... )
        >>> session = manage.schedule_session("group-1", "user-1", session_date)
        >>> manage.join_session(session.id, "user-2").participant_index
        1
    """

    def __init__(
        self,
        session_repo: WorkoutSessionRepository,
        participant_repo: ParticipantRepository,
        station_repo: StationPlanRepository,
        user_repo: UserRepository,
        group_repo: GroupRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._session_repo = session_repo
        self._participant_repo = participant_repo
        self._station_repo = station_repo
        self._user_repo = user_repo
        self._group_repo = group_repo
        self._clock = clock

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    def schedule_session(
        self,
        group_id: str,
        creator_id: str,
        session_date: datetime,
    ) -> WorkoutSession:
        """
        Create a Pending session for a group.

        Args:
            group_id: Owning group
            creator_id: Internal user ID of the scheduler
            session_date: Planned date; naive values are treated as UTC

        Raises:
            GroupNotFoundError: group does not exist
            UserNotFoundError: creator does not exist
        """
        if self._group_repo.get(group_id) is None:
            raise GroupNotFoundError(group_id)
        if self._user_repo.get(creator_id) is None:
            raise UserNotFoundError(creator_id)

        new_session = WorkoutSession(
            group_id=group_id,
            creator_id=creator_id,
            session_date=session_date,
            created_at=self._clock(),
        )
        row = self._session_repo.create(session_to_db_row(new_session))
        session = db_row_to_session(row)
        logger.info(f"Scheduled session {session.id} for group {group_id}")
        return session

    def get_session(self, session_id: str) -> WorkoutSession:
        row = self._session_repo.get(session_id)
        if row is None:
            raise SessionNotFoundError(session_id)
        return db_row_to_session(row)

    def list_sessions_for_group(self, group_id: str) -> List[WorkoutSession]:
        """List a group's sessions, newest session_date first."""
        if self._group_repo.get(group_id) is None:
            raise GroupNotFoundError(group_id)
        sessions = [db_row_to_session(r) for r in self._session_repo.list_by_group(group_id)]
        return sorted(sessions, key=lambda s: s.session_date, reverse=True)

    def reschedule_session(self, session_id: str, session_date: datetime) -> WorkoutSession:
        """
        Change a session's planned date.

        This is the only field edit offered; status and lifecycle timestamps
        are not writable here.
        """
        self.get_session(session_id)
        row = self._session_repo.update(
            session_id, {"session_date": ensure_utc(session_date).isoformat()}
        )
        if row is None:
            raise SessionNotFoundError(session_id)
        logger.info(f"Rescheduled session {session_id}")
        return db_row_to_session(row)

    def delete_session(self, session_id: str) -> None:
        if not self._session_repo.delete(session_id):
            raise SessionNotFoundError(session_id)
        logger.info(f"Deleted session {session_id}")

    # -------------------------------------------------------------------------
    # Roster
    # -------------------------------------------------------------------------

    def join_session(self, session_id: str, user_id: str) -> WorkoutSessionParticipant:
        """
        Add a user to a session's roster with the next participant index.

        Raises:
            SessionNotFoundError: session does not exist
            UserNotFoundError: user does not exist
            SessionClosedError: session is Completed or Cancelled
            ParticipantAlreadyJoinedError: user already joined
            ParticipantIndexConflictError: concurrent joins kept taking the next index
        """
        session = self.get_session(session_id)
        if session.status.is_terminal:
            raise SessionClosedError(session_id, session.status, "join")
        if self._user_repo.get(user_id) is None:
            raise UserNotFoundError(user_id)
        if self._participant_repo.get_by_session_and_user(session_id, user_id) is not None:
            raise ParticipantAlreadyJoinedError(session_id, user_id)

        for attempt in range(1, JOIN_ATTEMPTS + 1):
            roster = self._participant_repo.list_by_session(session_id)
            next_index = max((int(r["participant_index"]) for r in roster), default=0) + 1
            new_participant = WorkoutSessionParticipant(
                workout_session_id=session_id,
                user_id=user_id,
                participant_index=next_index,
                joined_at=self._clock(),
            )
            try:
                row = self._participant_repo.create(participant_to_db_row(new_participant))
            except ParticipantIndexConflictError:
                if attempt == JOIN_ATTEMPTS:
                    raise
                logger.warning(
                    f"Participant index {next_index} of session {session_id} taken concurrently; retrying"
                )
                continue
            participant = db_row_to_participant(row)
            logger.info(
                f"User {user_id} joined session {session_id} as participant {next_index}"
            )
            return participant

    def list_participants(self, session_id: str) -> List[WorkoutSessionParticipant]:
        self.get_session(session_id)
        participants = [
            db_row_to_participant(r) for r in self._participant_repo.list_by_session(session_id)
        ]
        return sorted(participants, key=lambda p: p.participant_index)

    # -------------------------------------------------------------------------
    # Station plan
    # -------------------------------------------------------------------------

    def assign_station(
        self,
        session_id: str,
        station_index: int,
        workout_type_id: str,
    ) -> WorkoutSessionWorkoutType:
        """
        Set which workout type runs at a station.

        Only allowed while the session is Pending: scores copy the workout
        type at record time, so the plan is frozen once the session starts.

        Raises:
            StationValidationError: station index out of range or blank type id
            SessionNotFoundError: session does not exist
            SessionClosedError: session is not Pending
        """
        if not MIN_STATION_INDEX <= station_index <= MAX_STATION_INDEX:
            raise StationValidationError(
                f"Station index must be between {MIN_STATION_INDEX} and {MAX_STATION_INDEX}"
            )
        workout_type_id = (workout_type_id or "").strip()
        if not workout_type_id:
            raise StationValidationError("Workout type ID is required")

        session = self.get_session(session_id)
        if session.status is not WorkoutSessionStatus.PENDING:
            raise SessionClosedError(session_id, session.status, "change the station plan")

        row = self._station_repo.upsert(session_id, station_index, workout_type_id)
        logger.info(
            f"Session {session_id} station {station_index} set to {workout_type_id}"
        )
        return db_row_to_station(row)

    def list_stations(self, session_id: str) -> List[WorkoutSessionWorkoutType]:
        self.get_session(session_id)
        stations = [db_row_to_station(r) for r in self._station_repo.list_by_session(session_id)]
        return sorted(stations, key=lambda s: s.station_index)
