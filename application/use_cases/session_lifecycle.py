"""
Session lifecycle use case.

Owns the status and timestamp fields of a workout session. Legal transitions:

    Pending --start--> Active --complete--> Completed
    Pending --cancel--> Cancelled
    Active  --cancel--> Cancelled

Every transition is persisted with a conditional write on the status that was
observed when the session was loaded, so two concurrent requests cannot both
move the same session. Cancel and Complete run score completion before they
return.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, FrozenSet, Optional

from application.exceptions import (
    GroupNotFoundError,
    InvalidSessionTransitionError,
    SessionNotFoundError,
)
from application.ports import (
    GroupRepository,
    ParticipantRepository,
    ScoreRepository,
    StationPlanRepository,
    WorkoutSessionRepository,
)
from application.use_cases.score_completion import ScoreCompletion
from domain.converters import db_row_to_session, status_change_to_db_row
from domain.models import WorkoutSession, WorkoutSessionStatus

logger = logging.getLogger(__name__)

Status = WorkoutSessionStatus


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionLifecycleUseCase:
    """
    Start, cancel and complete workout sessions.

    Usage:
        >>> lifecycle = SessionLifecycleUseCase(
        ...     session_repo=session_repo,
        ...     participant_repo=participant_repo,
        ...     station_repo=station_repo,
        ...     score_repo=score_repo,
        ...     group_repo=group_repo,
        ... )
        >>> session = lifecycle.start_session("session-123")
        >>> session.status
        <WorkoutSessionStatus.ACTIVE: 'active'>
    """

    def __init__(
        self,
        session_repo: WorkoutSessionRepository,
        participant_repo: ParticipantRepository,
        station_repo: StationPlanRepository,
        score_repo: ScoreRepository,
        group_repo: GroupRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            session_repo: Repository for session records
            participant_repo: Roster lookups for score completion
            station_repo: Station plan lookups for score completion
            score_repo: Score store written by score completion
            group_repo: Group lookups for the active-session query
            clock: Returns the current time; must be timezone-aware
        """
        self._session_repo = session_repo
        self._group_repo = group_repo
        self._clock = clock
        self._completion = ScoreCompletion(
            participant_repo=participant_repo,
            station_repo=station_repo,
            score_repo=score_repo,
            clock=clock,
        )

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def start_session(self, session_id: str) -> WorkoutSession:
        """
        Move a Pending session to Active and stamp started_at.

        Raises:
            SessionNotFoundError: session does not exist
            InvalidSessionTransitionError: session is not Pending
        """
        return self._transition(
            session_id,
            operation="started",
            allowed=frozenset({Status.PENDING}),
            target=Status.ACTIVE,
        )

    def cancel_session(self, session_id: str) -> WorkoutSession:
        """
        Cancel a Pending or Active session, then zero-fill missing scores.

        started_at is left untouched so a session cancelled before it was
        started keeps no start time.

        Raises:
            SessionNotFoundError: session does not exist
            InvalidSessionTransitionError: session is Completed or Cancelled
        """
        return self._transition(
            session_id,
            operation="cancelled",
            allowed=frozenset({Status.PENDING, Status.ACTIVE}),
            target=Status.CANCELLED,
        )

    def complete_session(self, session_id: str) -> WorkoutSession:
        """
        Complete an Active session, then zero-fill missing scores.

        Raises:
            SessionNotFoundError: session does not exist
            InvalidSessionTransitionError: session is not Active
        """
        return self._transition(
            session_id,
            operation="completed",
            allowed=frozenset({Status.ACTIVE}),
            target=Status.COMPLETED,
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_active_session_for_group(self, group_id: str) -> Optional[WorkoutSession]:
        """
        Get the group's Active session, latest started_at first.

        Returns:
            The session, or None when the group has no Active session

        Raises:
            GroupNotFoundError: group does not exist
        """
        if self._group_repo.get(group_id) is None:
            raise GroupNotFoundError(group_id)

        row = self._session_repo.find_active_by_group(group_id)
        if row is None:
            logger.debug(f"No active session for group {group_id}")
            return None
        return db_row_to_session(row)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _load(self, session_id: str) -> WorkoutSession:
        row = self._session_repo.get(session_id)
        if row is None:
            raise SessionNotFoundError(session_id)
        return db_row_to_session(row)

    def _transition(
        self,
        session_id: str,
        *,
        operation: str,
        allowed: FrozenSet[WorkoutSessionStatus],
        target: WorkoutSessionStatus,
    ) -> WorkoutSession:
        session = self._load(session_id)
        while True:
            if session.status not in allowed:
                raise self._invalid(session, operation, allowed)

            now = self._clock()
            if target is Status.ACTIVE:
                changes = status_change_to_db_row(target, started_at=now)
            else:
                changes = status_change_to_db_row(target, ended_at=now)

            row = self._session_repo.update_if_status(session_id, session.status.value, changes)
            if row is not None:
                break

            # Status moved under us; statuses only move forward so this ends
            current = self._load(session_id)
            logger.warning(
                f"Session {session_id} changed from {session.status.label} to "
                f"{current.status.label} while it was being {operation}"
            )
            session = current

        updated = db_row_to_session(row)
        logger.info(
            f"Session {session_id} {operation}: {session.status.label} -> {updated.status.label}"
        )

        if updated.status.is_terminal:
            self._completion.execute(session_id)
        return updated

    @staticmethod
    def _invalid(
        session: WorkoutSession,
        operation: str,
        allowed: FrozenSet[WorkoutSessionStatus],
    ) -> InvalidSessionTransitionError:
        allowed_labels = " or ".join(
            status.label for status in Status if status in allowed
        )
        return InvalidSessionTransitionError(
            session_id=session.id,
            current_status=session.status,
            operation=operation,
            allowed=allowed_labels,
        )
