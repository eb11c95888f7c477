"""
Placement Routes

GET /placement/prediction - Tier, recommended companies and the stats behind them
"""

from fastapi import APIRouter, Depends

from placeprep.core.auth import get_current_user
from placeprep.services import data_service
from placeprep.services.mongo_service import NoteService
from placeprep.services.ranking_service import round_half_up
from placeprep.services.placement_service import (
    predict, summarize_activity, IMPROVEMENT_SUGGESTIONS
)
from placeprep.schemas.schemas import PlacementPredictionResponse, PlacementStats

router = APIRouter(prefix="/placement", tags=["Placement"])


@router.get("/prediction", response_model=PlacementPredictionResponse)
async def get_prediction(user: dict = Depends(get_current_user)):
    """
    Rule-based placement prediction.

    performance = (tests * 10 + average % + completed courses * 20) / 3
    A course is completed once its progress reaches 80.
    """
    user_id = user["user_id"]
    tests = data_service.to_test_records(user_id, data_service.fetch_user_tests(user_id))
    summary = summarize_activity(tests, data_service.fetch_user_course_progress(user_id))
    result = predict(summary)

    return PlacementPredictionResponse(
        prediction=result.tier.value,
        performance_score=round(result.performance_score, 2),
        recommended_companies=list(result.recommended_companies),
        suggestions=list(IMPROVEMENT_SUGGESTIONS),
        stats=PlacementStats(
            tests_completed=summary.tests_completed,
            average_score=round_half_up(summary.average_score_percent),
            courses_completed=summary.courses_completed_count,
            notes_count=NoteService().count_for_user(user_id)
        )
    )
