"""
Interval scores router.

Scores can be submitted and corrected only while their session is Active.
"""

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_record_score
from api.routers.errors import APPLICATION_ERRORS, http_error
from api.schemas import CorrectScoreRequest, SubmitScoreRequest
from application.use_cases import RecordScoreUseCase
from domain.models import WorkoutIntervalScore

router = APIRouter(
    prefix="/scores",
    tags=["Scores"],
)


@router.post("", response_model=WorkoutIntervalScore, status_code=201)
def submit_score(
    request: SubmitScoreRequest,
    user_id: str = Depends(get_current_user),
    record: RecordScoreUseCase = Depends(get_record_score),
):
    """
    Record a score for one participant, round and station.

    Returns 409 if the slot already has a score or the session is not Active.
    """
    try:
        return record.submit_score(
            participant_id=request.participant_id,
            round_number=request.round_number,
            station_index=request.station_index,
            score=request.score,
            weight=request.weight,
        )
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e


@router.patch("/{score_id}", response_model=WorkoutIntervalScore)
def correct_score(
    score_id: str,
    request: CorrectScoreRequest,
    user_id: str = Depends(get_current_user),
    record: RecordScoreUseCase = Depends(get_record_score),
):
    try:
        return record.correct_score(score_id, score=request.score, weight=request.weight)
    except APPLICATION_ERRORS as e:
        raise http_error(e) from e
