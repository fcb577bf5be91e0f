"""
Pydantic models for the workout session API.

Request bodies only; responses use the domain models directly.
Range checks on rounds, stations and scores are done by the use cases so
they surface as 400 with a readable message.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ScheduleSessionRequest(BaseModel):
    """Schedule a new session; the caller becomes its creator."""
    group_id: str = Field(..., min_length=1)
    session_date: datetime


class RescheduleSessionRequest(BaseModel):
    """Generic session edit. Status and lifecycle timestamps are not accepted."""
    model_config = ConfigDict(extra="forbid")

    session_date: datetime


class JoinSessionRequest(BaseModel):
    """Join a session. Omitting user_id joins the caller."""
    user_id: Optional[str] = None


class AssignStationRequest(BaseModel):
    workout_type_id: str


class SubmitScoreRequest(BaseModel):
    participant_id: str = Field(..., min_length=1)
    round_number: int
    station_index: int
    score: int
    weight: Optional[Decimal] = None


class CorrectScoreRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    score: int
    weight: Optional[Decimal] = None
