"""
Analytics Service

Small calculations behind the dashboard, test history and course pages.
All functions are pure and take rows already fetched by data_service.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from placeprep.services.ranking_service import round_half_up


# Fixed syllabus shown for every course; progress moves one module at a time
COURSE_MODULES = (
    {"title": "Introduction to the Course", "duration": "30 min"},
    {"title": "Core Concepts Overview", "duration": "45 min"},
    {"title": "Practical Applications", "duration": "1 hour"},
    {"title": "Advanced Topics", "duration": "1.5 hours"},
    {"title": "Practice Problems", "duration": "2 hours"},
    {"title": "Final Assessment", "duration": "1 hour"},
)


@dataclass(frozen=True)
class HistoryStats:
    total_tests: int = 0
    average_score: int = 0
    best_score: int = 0
    total_minutes: int = 0


@dataclass(frozen=True)
class DashboardStats:
    enrolled: int
    tests_completed: int
    progress_points: int


def score_percentage(score: int, total_questions: int) -> float:
    if total_questions <= 0:
        return 0.0
    return score / total_questions * 100


def score_band(percentage: float) -> str:
    """Label for a single test result."""
    if percentage >= 80:
        return "Excellent"
    if percentage >= 60:
        return "Good"
    if percentage >= 40:
        return "Average"
    return "Needs Improvement"


def history_stats(tests: List[dict]) -> HistoryStats:
    """
    Summary cards for the test history page.

    Args:
        tests: mock_tests rows with score, total_questions, duration_minutes

    Rows without questions are left out of the percentages but their
    minutes still count toward total time.
    """
    if not tests:
        return HistoryStats()

    percentages = [
        score_percentage(t["score"], t["total_questions"])
        for t in tests if t["total_questions"] > 0
    ]
    total_minutes = sum(t.get("duration_minutes") or 0 for t in tests)

    if not percentages:
        return HistoryStats(total_tests=len(tests), total_minutes=total_minutes)

    return HistoryStats(
        total_tests=len(tests),
        average_score=round_half_up(sum(percentages) / len(percentages)),
        best_score=round_half_up(max(percentages)),
        total_minutes=total_minutes
    )


def dashboard_stats(enrollment_progress: Iterable[Optional[int]], tests_completed: int) -> DashboardStats:
    """
    Headline numbers on the dashboard.

    progress_points is the sum of enrollment progress values; the front end
    shows it as learning hours.
    """
    progress = [p or 0 for p in enrollment_progress]
    return DashboardStats(
        enrolled=len(progress),
        tests_completed=tests_completed,
        progress_points=sum(progress)
    )


def module_progress(completed_modules: int, total_modules: int = len(COURSE_MODULES)) -> int:
    """Course progress percentage after completing the first N modules."""
    if total_modules <= 0:
        raise ValueError("Course must have at least one module")
    percent = round_half_up(completed_modules / total_modules * 100)
    return max(0, min(100, percent))
