"""
Read-only projection of a session used by the live-session screen.

Structural fields (ids, indices, status) are authoritative. Display fields
(user name, workout type name/description) are best-effort enrichment.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.workout_session import WorkoutSessionStatus

UNKNOWN_USER_NAME = "Unknown user"


class ParticipantAssignment(BaseModel):
    """A roster entry annotated with the user's display name."""

    participant_id: str
    user_id: str
    user_name: str = UNKNOWN_USER_NAME
    participant_index: int


class StationAssignment(BaseModel):
    """A station annotated with its workout type's name and description."""

    station_index: int
    workout_type_id: str
    workout_type_name: str
    workout_type_description: Optional[str] = None


class SessionAssignments(BaseModel):
    """Session status with ordered participants and stations."""

    session_id: str
    status: WorkoutSessionStatus
    participants: List[ParticipantAssignment] = Field(default_factory=list)
    stations: List[StationAssignment] = Field(default_factory=list)
