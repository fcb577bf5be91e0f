"""
Per-round, per-station score for one participant.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.station import MAX_STATION_INDEX, MIN_STATION_INDEX
from domain.models.workout_session import ensure_utc

ROUNDS = (1, 2, 3)


class WorkoutIntervalScore(BaseModel):
    """
    Recorded result for one participant at one station during one round.

    (participant_id, round_number, station_index) is unique. workout_type_id is
    a denormalized copy of the station plan entry at the time of recording so
    progression queries do not need the plan.
    """

    id: Optional[str] = Field(default=None, description="None until stored")
    participant_id: str
    round_number: int = Field(..., ge=ROUNDS[0], le=ROUNDS[-1])
    station_index: int = Field(..., ge=MIN_STATION_INDEX, le=MAX_STATION_INDEX)
    workout_type_id: str
    score: int = Field(..., ge=0)
    weight: Optional[Decimal] = None
    recorded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("recorded_at")
    @classmethod
    def normalize_to_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @property
    def slot(self) -> tuple:
        """The (round, station) pair this score covers."""
        return (self.round_number, self.station_index)
