"""
Session roster entry.

A participant is a user joined to one session. participant_index records join
order (1-based) and is unique within the session, as is the user.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.workout_session import ensure_utc


class WorkoutSessionParticipant(BaseModel):
    """A user who has joined a specific session."""

    id: Optional[str] = Field(default=None, description="None until stored")
    workout_session_id: str
    user_id: str
    participant_index: int = Field(..., ge=1, description="1-based join order")
    joined_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("joined_at")
    @classmethod
    def normalize_to_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)
