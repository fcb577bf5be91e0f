"""
Unit tests for domain converters.

Tests for:
- db_row_to_session / session_to_db_row
- status_change_to_db_row
- db_row_to_participant / participant_to_db_row, db_row_to_station
- db_row_to_score / score_to_db_row
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from domain.converters import (
    db_row_to_participant,
    db_row_to_score,
    db_row_to_session,
    db_row_to_station,
    participant_to_db_row,
    score_to_db_row,
    session_to_db_row,
    status_change_to_db_row,
)
from domain.models import (
    WorkoutIntervalScore,
    WorkoutSession,
    WorkoutSessionParticipant,
    WorkoutSessionStatus,
)


@pytest.mark.unit
class TestSessionRows:
    """Tests for workout_sessions rows."""

    def test_parses_supabase_row(self):
        session = db_row_to_session({
            "id": "s1",
            "group_id": "g1",
            "creator_id": "u1",
            "session_date": "2026-01-05T18:00:00Z",
            "started_at": "2026-01-05T18:02:11+00:00",
            "ended_at": None,
            "status": "active",
            "created_at": "2026-01-01T09:00:00Z",
        })

        assert session.status is WorkoutSessionStatus.ACTIVE
        assert session.session_date == datetime(2026, 1, 5, 18, 0, tzinfo=timezone.utc)
        assert session.started_at == datetime(2026, 1, 5, 18, 2, 11, tzinfo=timezone.utc)
        assert session.ended_at is None

    def test_offset_timestamps_become_utc(self):
        session = db_row_to_session({
            "id": "s1",
            "group_id": "g1",
            "creator_id": "u1",
            "session_date": "2026-01-05T20:00:00+02:00",
            "status": "pending",
            "created_at": "2026-01-01T09:00:00",
        })

        assert session.session_date == datetime(2026, 1, 5, 18, 0, tzinfo=timezone.utc)
        assert session.created_at.tzinfo == timezone.utc

    def test_missing_status_defaults_to_pending(self):
        session = db_row_to_session({
            "id": "s1",
            "group_id": "g1",
            "creator_id": "u1",
            "session_date": "2026-01-05T18:00:00Z",
            "created_at": "2026-01-01T09:00:00Z",
        })

        assert session.status is WorkoutSessionStatus.PENDING

    def test_to_row(self):
        session = db_row_to_session({
            "id": "s1",
            "group_id": "g1",
            "creator_id": "u1",
            "session_date": "2026-01-05T18:00:00Z",
            "status": "completed",
            "started_at": "2026-01-05T18:00:00Z",
            "ended_at": "2026-01-05T18:45:00Z",
            "created_at": "2026-01-01T09:00:00Z",
        })

        row = session_to_db_row(session)

        assert row["status"] == "completed"
        assert row["ended_at"] == "2026-01-05T18:45:00+00:00"
        assert row["id"] == "s1"

    def test_unsaved_session_row_has_no_id(self):
        session = WorkoutSession(
            group_id="g1",
            creator_id="u1",
            session_date=datetime(2026, 1, 5, 18, 0),
            created_at=datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc),
        )

        row = session_to_db_row(session)

        assert "id" not in row
        assert row["status"] == "pending"
        assert row["session_date"] == "2026-01-05T18:00:00+00:00"
        assert row["started_at"] is None


@pytest.mark.unit
class TestStatusChangeRow:
    """Tests for the partial row written by transitions."""

    def test_start_writes_started_at_only(self):
        now = datetime(2026, 1, 5, 18, 0, tzinfo=timezone.utc)

        changes = status_change_to_db_row(WorkoutSessionStatus.ACTIVE, started_at=now)

        assert changes == {"status": "active", "started_at": "2026-01-05T18:00:00+00:00"}

    def test_end_writes_ended_at_only(self):
        now = datetime(2026, 1, 5, 18, 45, tzinfo=timezone.utc)

        changes = status_change_to_db_row(WorkoutSessionStatus.CANCELLED, ended_at=now)

        assert changes == {"status": "cancelled", "ended_at": "2026-01-05T18:45:00+00:00"}
        assert "started_at" not in changes


@pytest.mark.unit
class TestRosterAndPlanRows:
    """Tests for participant and station plan rows."""

    def test_participant(self):
        participant = db_row_to_participant({
            "id": 7,
            "workout_session_id": "s1",
            "user_id": "u1",
            "participant_index": "2",
            "joined_at": "2026-01-05T17:55:00Z",
        })

        assert participant.id == "7"
        assert participant.participant_index == 2

    def test_participant_to_row(self):
        participant = WorkoutSessionParticipant(
            workout_session_id="s1",
            user_id="u1",
            participant_index=3,
            joined_at=datetime(2026, 1, 5, 17, 55, tzinfo=timezone.utc),
        )

        assert participant_to_db_row(participant) == {
            "workout_session_id": "s1",
            "user_id": "u1",
            "participant_index": 3,
            "joined_at": "2026-01-05T17:55:00+00:00",
        }

    def test_stored_participant_keeps_id(self):
        participant = WorkoutSessionParticipant(
            id="p1",
            workout_session_id="s1",
            user_id="u1",
            participant_index=1,
        )

        assert participant_to_db_row(participant)["id"] == "p1"

    def test_station(self):
        station = db_row_to_station({
            "id": "w1",
            "workout_session_id": "s1",
            "workout_type_id": "burpees",
            "station_index": 4,
        })

        assert station.station_index == 4
        assert station.workout_type_id == "burpees"


@pytest.mark.unit
class TestScoreRows:
    """Tests for workout_interval_scores rows."""

    @pytest.mark.parametrize("raw", ["22.5", 22.5, Decimal("22.5")])
    def test_weight_parsed_as_decimal(self, raw):
        score = db_row_to_score({
            "id": "sc1",
            "participant_id": "p1",
            "round_number": 1,
            "station_index": 2,
            "workout_type_id": "burpees",
            "score": 12,
            "weight": raw,
            "recorded_at": "2026-01-05T18:10:00Z",
        })

        assert score.weight == Decimal("22.5")

    def test_null_weight(self):
        score = db_row_to_score({
            "id": "sc1",
            "participant_id": "p1",
            "round_number": 3,
            "station_index": 1,
            "workout_type_id": "burpees",
            "score": 0,
            "weight": None,
            "recorded_at": "2026-01-05T18:10:00Z",
        })

        assert score.weight is None
        assert score_to_db_row(score)["weight"] is None

    def test_weight_serialized_as_string(self):
        score = db_row_to_score({
            "id": "sc1",
            "participant_id": "p1",
            "round_number": 1,
            "station_index": 1,
            "workout_type_id": "burpees",
            "score": 5,
            "weight": "10.25",
            "recorded_at": "2026-01-05T18:10:00Z",
        })

        assert score_to_db_row(score)["weight"] == "10.25"

    def test_new_score_row(self):
        score = WorkoutIntervalScore(
            participant_id="p1",
            round_number=2,
            station_index=3,
            workout_type_id="squats",
            score=0,
            recorded_at=datetime(2026, 1, 5, 18, 45, tzinfo=timezone.utc),
        )

        assert score_to_db_row(score) == {
            "participant_id": "p1",
            "round_number": 2,
            "station_index": 3,
            "workout_type_id": "squats",
            "score": 0,
            "weight": None,
            "recorded_at": "2026-01-05T18:45:00+00:00",
        }
