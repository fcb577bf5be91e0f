"""
RecordScore use case.

Score submission and correction while a session is running. Scores are
append-only once the session has ended: zero-filled and submitted scores of a
Completed or Cancelled session can no longer be changed.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable, Dict, List, Optional

from application.exceptions import (
    ParticipantNotFoundError,
    ScoreNotFoundError,
    ScoreValidationError,
    SessionClosedError,
    SessionNotFoundError,
)
from application.ports import (
    ParticipantRepository,
    ScoreRepository,
    StationPlanRepository,
    WorkoutSessionRepository,
)
from application.use_cases.session_lifecycle import utc_now
from domain.converters import (
    db_row_to_participant,
    db_row_to_score,
    db_row_to_session,
    db_row_to_station,
    score_to_db_row,
)
from domain.models import (
    MAX_STATION_INDEX,
    MIN_STATION_INDEX,
    ROUNDS,
    WorkoutIntervalScore,
    WorkoutSession,
    WorkoutSessionParticipant,
    WorkoutSessionStatus,
)

logger = logging.getLogger(__name__)


class RecordScoreUseCase:
    """
    Use case for submitting, listing and correcting interval scores.

    Usage:
        >>> record = RecordScoreUseCase(
        ...     session_repo=session_repo,
        ...     participant_repo=participant_repo,
        ...     station_repo=station_repo,
        ...     score_repo=score_repo,
        ... )
        >>> score = record.submit_score("participant-1", 1, 2, score=15)
        >>> score.workout_type_id
        'burpees'
    """

    def __init__(
        self,
        session_repo: WorkoutSessionRepository,
        participant_repo: ParticipantRepository,
        station_repo: StationPlanRepository,
        score_repo: ScoreRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._session_repo = session_repo
        self._participant_repo = participant_repo
        self._station_repo = station_repo
        self._score_repo = score_repo
        self._clock = clock

    def submit_score(
        self,
        participant_id: str,
        round_number: int,
        station_index: int,
        score: int,
        weight: Optional[Decimal] = None,
    ) -> WorkoutIntervalScore:
        """
        Record a participant's score for one round at one station.

        The workout type is copied from the session's station plan.

        Raises:
            ScoreValidationError: out-of-range values or unconfigured station
            ParticipantNotFoundError: participant does not exist
            SessionClosedError: session is not Active
            DuplicateScoreError: a score already exists for this slot
        """
        self._validate(score, weight, round_number=round_number, station_index=station_index)

        participant = self._participant(participant_id)
        session = self._session(participant.workout_session_id)
        if session.status is not WorkoutSessionStatus.ACTIVE:
            raise SessionClosedError(session.id, session.status, "record scores")

        plan = {
            entry.station_index: entry
            for entry in (
                db_row_to_station(r) for r in self._station_repo.list_by_session(session.id)
            )
        }
        station = plan.get(station_index)
        if station is None:
            raise ScoreValidationError(
                f"Station {station_index} is not configured for session {session.id}"
            )

        new_score = WorkoutIntervalScore(
            participant_id=participant_id,
            round_number=round_number,
            station_index=station_index,
            workout_type_id=station.workout_type_id,
            score=score,
            weight=weight,
            recorded_at=self._clock(),
        )
        row = self._score_repo.insert(score_to_db_row(new_score))
        logger.info(
            f"Recorded score {score} for participant {participant_id} "
            f"(round {round_number}, station {station_index})"
        )
        return db_row_to_score(row)

    def list_session_scores(self, session_id: str) -> List[WorkoutIntervalScore]:
        """List a session's scores by participant index, round, then station."""
        self._session(session_id)
        participants = [
            db_row_to_participant(r) for r in self._participant_repo.list_by_session(session_id)
        ]
        if not participants:
            return []

        index_by_id: Dict[str, int] = {p.id: p.participant_index for p in participants}
        scores = [
            db_row_to_score(r)
            for r in self._score_repo.list_by_participants(list(index_by_id))
        ]
        return sorted(
            scores,
            key=lambda s: (index_by_id.get(s.participant_id, 0), s.round_number, s.station_index),
        )

    def list_scores_for_workout_type(self, workout_type_id: str) -> List[WorkoutIntervalScore]:
        """
        List every score recorded under a workout type, oldest first.

        Zero-filled scores are included; they carry the plan's workout type
        like submitted ones.
        """
        scores = [
            db_row_to_score(r) for r in self._score_repo.list_by_workout_type(workout_type_id)
        ]
        return sorted(scores, key=lambda s: s.recorded_at)

    def correct_score(
        self,
        score_id: str,
        score: int,
        weight: Optional[Decimal] = None,
    ) -> WorkoutIntervalScore:
        """
        Correct a score while its session is still Active.

        Raises:
            ScoreValidationError: negative score or weight
            ScoreNotFoundError: score does not exist
            SessionClosedError: session is no longer Active
        """
        self._validate(score, weight)

        row = self._score_repo.get(score_id)
        if row is None:
            raise ScoreNotFoundError(score_id)
        existing = db_row_to_score(row)

        participant = self._participant(existing.participant_id)
        session = self._session(participant.workout_session_id)
        if session.status is not WorkoutSessionStatus.ACTIVE:
            raise SessionClosedError(session.id, session.status, "correct scores")

        updated = self._score_repo.update(
            score_id,
            {"score": score, "weight": str(weight) if weight is not None else None},
        )
        if updated is None:
            raise ScoreNotFoundError(score_id)
        logger.info(f"Corrected score {score_id}: {existing.score} -> {score}")
        return db_row_to_score(updated)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _participant(self, participant_id: str) -> WorkoutSessionParticipant:
        row = self._participant_repo.get(participant_id)
        if row is None:
            raise ParticipantNotFoundError(participant_id)
        return db_row_to_participant(row)

    def _session(self, session_id: str) -> WorkoutSession:
        row = self._session_repo.get(session_id)
        if row is None:
            raise SessionNotFoundError(session_id)
        return db_row_to_session(row)

    @staticmethod
    def _validate(
        score: int,
        weight: Optional[Decimal],
        *,
        round_number: Optional[int] = None,
        station_index: Optional[int] = None,
    ) -> None:
        if round_number is not None and round_number not in ROUNDS:
            raise ScoreValidationError(
                f"Round number must be between {ROUNDS[0]} and {ROUNDS[-1]}"
            )
        if station_index is not None and not MIN_STATION_INDEX <= station_index <= MAX_STATION_INDEX:
            raise ScoreValidationError(
                f"Station index must be between {MIN_STATION_INDEX} and {MAX_STATION_INDEX}"
            )
        if score < 0:
            raise ScoreValidationError("Score must be zero or greater")
        if weight is not None and weight < 0:
            raise ScoreValidationError("Weight must be zero or greater")
