"""
Station plan entry: which workout type runs at which station of a session.
"""

from pydantic import BaseModel, Field, field_validator

MIN_STATION_INDEX = 1
MAX_STATION_INDEX = 4


class WorkoutSessionWorkoutType(BaseModel):
    """
    One station of a session's plan.

    (workout_session_id, station_index) is unique: exactly one workout type
    per station per session.
    """

    id: str
    workout_session_id: str
    workout_type_id: str = Field(..., min_length=1)
    station_index: int = Field(..., ge=MIN_STATION_INDEX, le=MAX_STATION_INDEX)

    @field_validator("workout_type_id")
    @classmethod
    def strip_workout_type_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Workout type ID is required")
        return v
