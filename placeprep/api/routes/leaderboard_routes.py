"""
Leaderboard Routes

GET /leaderboard - Ranked leaderboard over all users, plus the caller's rank

Recomputed from every mock test and profile on each request; nothing
about ranks is stored.
"""

from fastapi import APIRouter, Depends

from placeprep.core.auth import get_current_user
from placeprep.core.config import get_settings
from placeprep.services import data_service
from placeprep.services.ranking_service import compute_leaderboard, rank_badge
from placeprep.schemas.schemas import LeaderboardResponse, LeaderboardEntryResponse

router = APIRouter(prefix="/leaderboard", tags=["Leaderboard"])


@router.get("", response_model=LeaderboardResponse)
async def get_leaderboard(user: dict = Depends(get_current_user)):
    """
    Rank everyone by average test percentage (highest first).

    Ranks are 1..N with no gaps; equal averages keep the order in which
    users first completed a test.
    """
    result = compute_leaderboard(
        tests=data_service.fetch_all_test_records(),
        profiles=data_service.fetch_all_profiles(),
        current_user_id=user["user_id"]
    )

    entries = result.entries
    limit = get_settings().leaderboard_limit
    if limit:
        entries = entries[:limit]

    return LeaderboardResponse(
        entries=[
            LeaderboardEntryResponse(
                rank=e.rank, user_id=e.user_id, display_name=e.display_name,
                total_score=e.total_score_percent_sum, tests_completed=e.tests_completed,
                average_score=e.average_score, badge=rank_badge(e.rank),
                is_current_user=e.user_id == user["user_id"]
            ) for e in entries
        ],
        current_user_rank=result.current_user_rank,
        total_users=len(result.entries)
    )
