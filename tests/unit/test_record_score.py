"""
Unit tests for RecordScoreUseCase.
"""

from decimal import Decimal

import pytest

from application.exceptions import (
    DuplicateScoreError,
    ParticipantNotFoundError,
    ScoreNotFoundError,
    ScoreValidationError,
    SessionClosedError,
    SessionNotFoundError,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def running(repos):
    """Active session with two participants and two stations."""
    session_id = repos.add_session(status="active")
    alice, bob = repos.add_participants(session_id, ["alice", "bob"])
    repos.add_stations(session_id, ["burpees", "squats"])
    return session_id, alice, bob


class TestSubmitScore:
    def test_records_score_with_workout_type_from_plan(self, record, running, clock):
        _, alice, _ = running

        score = record.submit_score(alice, 1, 2, 15, weight=Decimal("20.5"))

        assert score.score == 15
        assert score.weight == Decimal("20.5")
        assert score.workout_type_id == "squats"
        assert score.recorded_at == clock.now

    def test_duplicate_slot(self, record, running):
        _, alice, _ = running
        record.submit_score(alice, 1, 1, 10)

        with pytest.raises(DuplicateScoreError):
            record.submit_score(alice, 1, 1, 12)

    def test_same_slot_for_different_participants(self, record, running):
        session_id, alice, bob = running

        record.submit_score(alice, 1, 1, 10)
        record.submit_score(bob, 1, 1, 12)

        assert len(record.list_session_scores(session_id)) == 2

    @pytest.mark.parametrize(
        "round_number,station_index,score",
        [(0, 1, 1), (4, 1, 1), (1, 0, 1), (1, 5, 1), (1, 1, -1)],
    )
    def test_range_checks(self, record, running, round_number, station_index, score):
        _, alice, _ = running

        with pytest.raises(ScoreValidationError):
            record.submit_score(alice, round_number, station_index, score)

    def test_negative_weight(self, record, running):
        _, alice, _ = running

        with pytest.raises(ScoreValidationError):
            record.submit_score(alice, 1, 1, 5, weight=Decimal("-1"))

    def test_unconfigured_station(self, record, running):
        _, alice, _ = running

        with pytest.raises(ScoreValidationError, match="Station 3"):
            record.submit_score(alice, 1, 3, 5)

    def test_unknown_participant(self, record, running):
        with pytest.raises(ParticipantNotFoundError):
            record.submit_score("nobody", 1, 1, 5)

    @pytest.mark.parametrize("status", ["pending", "completed", "cancelled"])
    def test_only_while_active(self, repos, record, status):
        session_id = repos.add_session(status=status)
        (alice,) = repos.add_participants(session_id, ["alice"])
        repos.add_stations(session_id, ["burpees"])

        with pytest.raises(SessionClosedError):
            record.submit_score(alice, 1, 1, 5)


class TestListSessionScores:
    def test_ordered_by_participant_round_station(self, record, running):
        session_id, alice, bob = running
        record.submit_score(bob, 1, 1, 3)
        record.submit_score(alice, 2, 1, 4)
        record.submit_score(alice, 1, 2, 5)
        record.submit_score(alice, 1, 1, 6)

        scores = record.list_session_scores(session_id)

        assert [(s.participant_id, s.round_number, s.station_index) for s in scores] == [
            (alice, 1, 1),
            (alice, 1, 2),
            (alice, 2, 1),
            (bob, 1, 1),
        ]

    def test_empty_roster(self, repos, record):
        session_id = repos.add_session()

        assert record.list_session_scores(session_id) == []

    def test_missing_session(self, record):
        with pytest.raises(SessionNotFoundError):
            record.list_session_scores("missing")


class TestListScoresForWorkoutType:
    def test_includes_submitted_and_zero_filled_scores(self, record, lifecycle, running, clock):
        session_id, alice, bob = running
        record.submit_score(alice, 1, 1, 15)
        clock.advance(minutes=40)
        lifecycle.complete_session(session_id)

        scores = record.list_scores_for_workout_type("burpees")

        assert len(scores) == 6
        assert {s.workout_type_id for s in scores} == {"burpees"}
        assert {s.station_index for s in scores} == {1}
        assert (scores[0].participant_id, scores[0].score) == (alice, 15)
        assert [s.score for s in scores[1:]] == [0] * 5
        assert {(s.participant_id, s.round_number) for s in scores} == {
            (p, r) for p in (alice, bob) for r in (1, 2, 3)
        }

    def test_spans_sessions_oldest_first(self, repos, record, running):
        _, alice, _ = running
        record.submit_score(alice, 1, 1, 15)
        earlier_session = repos.add_session(status="completed")
        (carol,) = repos.add_participants(earlier_session, ["carol"])
        repos.add_score(carol, 1, 3, 9, workout_type_id="burpees")

        scores = record.list_scores_for_workout_type("burpees")

        assert [(s.participant_id, s.score) for s in scores] == [(carol, 9), (alice, 15)]

    def test_other_workout_types_excluded(self, record, running):
        _, alice, _ = running
        record.submit_score(alice, 1, 2, 7)

        assert record.list_scores_for_workout_type("burpees") == []
        assert [s.score for s in record.list_scores_for_workout_type("squats")] == [7]


class TestCorrectScore:
    def test_correct_while_active(self, record, running):
        _, alice, _ = running
        original = record.submit_score(alice, 1, 1, 10)

        corrected = record.correct_score(original.id, 12, weight=Decimal("7.5"))

        assert corrected.score == 12
        assert corrected.weight == Decimal("7.5")
        assert corrected.workout_type_id == "burpees"

    @pytest.mark.parametrize("final_status", ["completed", "cancelled"])
    def test_scores_immutable_after_session_ends(self, repos, record, running, final_status):
        session_id, alice, _ = running
        original = record.submit_score(alice, 1, 1, 10)
        repos.sessions.set_status(session_id, final_status)

        with pytest.raises(SessionClosedError):
            record.correct_score(original.id, 99)

        assert repos.scores.get(original.id)["score"] == 10

    def test_missing_score(self, record):
        with pytest.raises(ScoreNotFoundError):
            record.correct_score("missing", 1)

    def test_negative_correction(self, record, running):
        _, alice, _ = running
        original = record.submit_score(alice, 1, 1, 10)

        with pytest.raises(ScoreValidationError):
            record.correct_score(original.id, -3)
