"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- FakeRepositories scenario builders for common test setups

Usage:
    from tests.fakes import FakeRepositories

    repos = FakeRepositories()
    session_id = repos.add_session(status="active")
    repos.add_participants(session_id, ["user-1", "user-2"])
    repos.add_stations(session_id, ["burpees", "squats"])
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import uuid

from tests.fakes.session_repository import (
    FakeWorkoutSessionRepository,
    FakeParticipantRepository,
    FakeStationPlanRepository,
)
from tests.fakes.score_repository import FakeScoreRepository
from tests.fakes.directory_repository import (
    FakeUserRepository,
    FakeGroupRepository,
    FakeWorkoutTypeRepository,
)

DEFAULT_GROUP_ID = "group-1"
DEFAULT_CREATOR_ID = "user-creator"
T0 = datetime(2026, 1, 5, 17, 0, tzinfo=timezone.utc)


@dataclass
class FakeRepositories:
    """All fakes wired together, with helpers to build session scenarios."""

    sessions: FakeWorkoutSessionRepository = field(default_factory=FakeWorkoutSessionRepository)
    participants: FakeParticipantRepository = field(default_factory=FakeParticipantRepository)
    stations: FakeStationPlanRepository = field(default_factory=FakeStationPlanRepository)
    scores: FakeScoreRepository = field(default_factory=FakeScoreRepository)
    users: FakeUserRepository = field(default_factory=FakeUserRepository)
    groups: FakeGroupRepository = field(default_factory=FakeGroupRepository)
    workout_types: FakeWorkoutTypeRepository = field(default_factory=FakeWorkoutTypeRepository)

    def __post_init__(self) -> None:
        self.groups.seed([{"id": DEFAULT_GROUP_ID, "name": "The Smiths"}])
        self.users.seed([{"id": DEFAULT_CREATOR_ID, "username": "Creator", "email": "creator@example.com"}])

    def reset(self) -> None:
        for repo in (
            self.sessions,
            self.participants,
            self.stations,
            self.scores,
            self.users,
            self.groups,
            self.workout_types,
        ):
            repo.reset()
        self.__post_init__()

    # =========================================================================
    # Scenario builders
    # =========================================================================

    def add_session(
        self,
        *,
        status: str = "pending",
        group_id: str = DEFAULT_GROUP_ID,
        session_id: Optional[str] = None,
        created_at: datetime = T0,
        started_at: Optional[datetime] = None,
        ended_at: Optional[datetime] = None,
    ) -> str:
        """Seed a session row and return its id."""
        session_id = session_id or str(uuid.uuid4())
        if started_at is None and status in ("active", "completed"):
            started_at = created_at
        if ended_at is None and status in ("completed", "cancelled"):
            ended_at = created_at
        self.sessions.seed([{
            "id": session_id,
            "group_id": group_id,
            "creator_id": DEFAULT_CREATOR_ID,
            "session_date": created_at.isoformat(),
            "status": status,
            "started_at": started_at.isoformat() if started_at else None,
            "ended_at": ended_at.isoformat() if ended_at else None,
            "created_at": created_at.isoformat(),
        }])
        return session_id

    def add_participants(self, session_id: str, user_ids: List[str]) -> List[str]:
        """Seed users (if missing) and join them in order; returns participant ids."""
        participant_ids = []
        start = len(self.participants.list_by_session(session_id))
        for offset, user_id in enumerate(user_ids, start=1):
            if self.users.get(user_id) is None:
                self.users.seed([{"id": user_id, "username": user_id.title(), "email": f"{user_id}@example.com"}])
            participant_id = str(uuid.uuid4())
            self.participants.seed([{
                "id": participant_id,
                "workout_session_id": session_id,
                "user_id": user_id,
                "participant_index": start + offset,
                "joined_at": T0.isoformat(),
            }])
            participant_ids.append(participant_id)
        return participant_ids

    def add_stations(self, session_id: str, workout_type_ids: List[str]) -> None:
        """Seed the station plan: workout_type_ids[0] at station 1, and so on."""
        for station_index, workout_type_id in enumerate(workout_type_ids, start=1):
            self.stations.upsert(session_id, station_index, workout_type_id)
            if self.workout_types.get(workout_type_id) is None:
                self.workout_types.seed([{
                    "id": workout_type_id,
                    "name": workout_type_id.replace("-", " ").title(),
                    "description": f"{workout_type_id} for one interval",
                }])

    def add_score(
        self,
        participant_id: str,
        round_number: int,
        station_index: int,
        score: int,
        *,
        workout_type_id: str = "burpees",
        weight: Optional[str] = None,
    ) -> str:
        score_id = str(uuid.uuid4())
        self.scores.seed([{
            "id": score_id,
            "participant_id": participant_id,
            "round_number": round_number,
            "station_index": station_index,
            "workout_type_id": workout_type_id,
            "score": score,
            "weight": weight,
            "recorded_at": T0.isoformat(),
        }])
        return score_id

    def scores_for(self, participant_id: str) -> List[Dict[str, Any]]:
        return self.scores.list_by_participant(participant_id)


__all__ = [
    "FakeWorkoutSessionRepository",
    "FakeParticipantRepository",
    "FakeStationPlanRepository",
    "FakeScoreRepository",
    "FakeUserRepository",
    "FakeGroupRepository",
    "FakeWorkoutTypeRepository",
    "FakeRepositories",
    "DEFAULT_GROUP_ID",
    "DEFAULT_CREATOR_ID",
    "T0",
]
