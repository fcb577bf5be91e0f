"""
Score completion for sessions that have ended.

Once a session is Completed or Cancelled every participant must have exactly
one score for each (round, station) pair of the session's station plan.
Missing pairs are filled with a score of 0. Existing scores are never touched.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Set, Tuple

from application.exceptions import DuplicateScoreError
from application.ports import ParticipantRepository, ScoreRepository, StationPlanRepository
from domain.converters import (
    db_row_to_participant,
    db_row_to_score,
    db_row_to_station,
    score_to_db_row,
)
from domain.models import ROUNDS, WorkoutIntervalScore

logger = logging.getLogger(__name__)


@dataclass
class ScoreCompletionResult:
    """Outcome of one completion pass."""

    session_id: str
    participants: int
    stations: int
    created: int = 0
    already_present: int = 0

    @property
    def expected_total(self) -> int:
        return self.participants * len(ROUNDS) * self.stations


class ScoreCompletion:
    """
    Zero-fills missing scores for a session's roster and station plan.

    The pass is idempotent: a triple that already has a score is skipped,
    and an insert rejected by the store's uniqueness constraint (a concurrent
    pass got there first) counts as already present.

    Usage:
        >>> completion = ScoreCompletion(participant_repo, station_repo, score_repo, clock)
        >>> result = completion.execute("session-123")
        >>> result.created
        12
    """

    def __init__(
        self,
        participant_repo: ParticipantRepository,
        station_repo: StationPlanRepository,
        score_repo: ScoreRepository,
        clock: Callable[[], datetime],
    ) -> None:
        self._participant_repo = participant_repo
        self._station_repo = station_repo
        self._score_repo = score_repo
        self._clock = clock

    def execute(self, session_id: str) -> ScoreCompletionResult:
        """
        Fill every unscored (participant, round, station) triple with 0.

        Args:
            session_id: Session whose roster and plan are completed

        Returns:
            ScoreCompletionResult with counts of created and skipped rows
        """
        participants = [
            db_row_to_participant(row)
            for row in self._participant_repo.list_by_session(session_id)
        ]
        stations = sorted(
            (db_row_to_station(row) for row in self._station_repo.list_by_session(session_id)),
            key=lambda s: s.station_index,
        )
        result = ScoreCompletionResult(
            session_id=session_id,
            participants=len(participants),
            stations=len(stations),
        )
        if not participants or not stations:
            logger.info(
                f"Score completion for session {session_id}: nothing to fill "
                f"({len(participants)} participants, {len(stations)} stations)"
            )
            return result

        recorded_at = self._clock()

        for participant in participants:
            existing = self._existing_slots(participant.id)
            for round_number in ROUNDS:
                for station in stations:
                    if (round_number, station.station_index) in existing:
                        result.already_present += 1
                        continue
                    zero = WorkoutIntervalScore(
                        participant_id=participant.id,
                        round_number=round_number,
                        station_index=station.station_index,
                        workout_type_id=station.workout_type_id,
                        score=0,
                        recorded_at=recorded_at,
                    )
                    try:
                        self._score_repo.insert(score_to_db_row(zero))
                        result.created += 1
                    except DuplicateScoreError:
                        logger.warning(
                            f"Score for participant {participant.id} round {round_number} "
                            f"station {station.station_index} appeared concurrently; skipping"
                        )
                        result.already_present += 1

        logger.info(
            f"Score completion for session {session_id}: created {result.created}, "
            f"already present {result.already_present}"
        )
        return result

    def _existing_slots(self, participant_id: str) -> Set[Tuple[int, int]]:
        scores: List[WorkoutIntervalScore] = [
            db_row_to_score(row) for row in self._score_repo.list_by_participant(participant_id)
        ]
        return {score.slot for score in scores}
