"""
Workout types router.

Progression queries across sessions, keyed by the workout type that each
score copied from its station plan.
"""

from typing import List

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_record_score
from application.use_cases import RecordScoreUseCase
from domain.models import WorkoutIntervalScore

router = APIRouter(
    prefix="/workout-types",
    tags=["Workout Types"],
)


@router.get("/{workout_type_id}/scores", response_model=List[WorkoutIntervalScore])
def list_workout_type_scores(
    workout_type_id: str,
    user_id: str = Depends(get_current_user),
    record: RecordScoreUseCase = Depends(get_record_score),
):
    """
    List every score recorded under a workout type, oldest first.

    Zero-filled scores from completed or cancelled sessions are included.
    """
    return record.list_scores_for_workout_type(workout_type_id)
