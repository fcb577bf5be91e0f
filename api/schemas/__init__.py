"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- sessions: Workout session, roster, station plan and score requests
"""

from api.schemas.sessions import (
    AssignStationRequest,
    CorrectScoreRequest,
    JoinSessionRequest,
    RescheduleSessionRequest,
    ScheduleSessionRequest,
    SubmitScoreRequest,
)

__all__ = [
    "ScheduleSessionRequest",
    "RescheduleSessionRequest",
    "JoinSessionRequest",
    "AssignStationRequest",
    "SubmitScoreRequest",
    "CorrectScoreRequest",
]
