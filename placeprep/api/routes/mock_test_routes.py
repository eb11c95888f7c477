"""
Mock Test Routes

GET /tests/questions - Question bank (no answer key)
POST /tests/submit - Grade answers and store the attempt
GET /tests/history - Own attempts (newest first) with summary stats
"""

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends

from placeprep.core.auth import get_current_user
from placeprep.services import data_service
from placeprep.services.ranking_service import round_half_up
from placeprep.services.analytics_service import score_percentage, score_band, history_stats
from placeprep.services.mock_test_service import (
    QUESTION_BANK, DEFAULT_TEST_NAME, DEFAULT_DURATION_MINUTES,
    public_questions, grade_answers
)
from placeprep.schemas.schemas import (
    QuestionResponse, TestSubmission, TestResultResponse,
    TestHistoryResponse, HistoryStatsResponse
)

router = APIRouter(prefix="/tests", tags=["Mock Tests"])


def _result_response(row: dict) -> TestResultResponse:
    percentage = score_percentage(row["score"], row["total_questions"])
    return TestResultResponse(
        test_id=row["test_id"],
        test_name=row["test_name"],
        score=row["score"],
        total_questions=row["total_questions"],
        percentage=round_half_up(percentage),
        band=score_band(percentage),
        duration_minutes=row["duration_minutes"] or 0,
        completed_at=row["completed_at"] or datetime.utcnow()
    )


@router.get("/questions", response_model=List[QuestionResponse])
async def get_questions(user: dict = Depends(get_current_user)):
    return [QuestionResponse(**q) for q in public_questions()]


@router.post("/submit", response_model=TestResultResponse, status_code=201)
async def submit_test(submission: TestSubmission, user: dict = Depends(get_current_user)):
    """
    Grade a mock test and record it.

    Score = number of answers matching the key; unanswered questions count as wrong.
    """
    score = grade_answers(submission.answers)
    duration = submission.duration_minutes
    if duration is None:
        duration = DEFAULT_DURATION_MINUTES

    row = data_service.insert_mock_test(
        user_id=user["user_id"],
        test_name=DEFAULT_TEST_NAME,
        score=score,
        total_questions=len(QUESTION_BANK),
        duration_minutes=duration
    )
    return _result_response(row)


@router.get("/history", response_model=TestHistoryResponse)
async def get_history(user: dict = Depends(get_current_user)):
    rows = data_service.fetch_user_tests(user["user_id"])
    stats = history_stats(rows)

    return TestHistoryResponse(
        stats=HistoryStatsResponse(
            total_tests=stats.total_tests, average_score=stats.average_score,
            best_score=stats.best_score, total_minutes=stats.total_minutes
        ),
        tests=[_result_response(r) for r in rows]
    )
