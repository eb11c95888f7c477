"""
Placement Prediction Service

PURPOSE:
Classify a student's placement readiness from three activity counters and
suggest companies that match the tier.

FORMULA:
    performance_score = (tests_completed * 10 + average_score_percent
                         + courses_completed * 20) / 3

The weights mix counts and a percentage and the result is not bounded to
100. This is the product's scoring rule and is reproduced as-is.

TIERS (first match wins):
    >= 80  Excellent
    >= 60  Very Good
    >= 40  Good
    else   Needs Improvement
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from placeprep.services.ranking_service import TestRecord

# A course counts as completed once stored progress reaches this value
COURSE_COMPLETION_THRESHOLD = 80

TEST_WEIGHT = 10
SCORE_WEIGHT = 1
COURSE_WEIGHT = 20


class PlacementTier(str, Enum):
    excellent = "Excellent"
    very_good = "Very Good"
    good = "Good"
    needs_improvement = "Needs Improvement"


# (lower bound, tier, companies), checked top to bottom
TIER_TABLE = (
    (80, PlacementTier.excellent, ("Google", "Microsoft", "Amazon", "Meta", "Apple")),
    (60, PlacementTier.very_good, ("Adobe", "Salesforce", "Oracle", "IBM", "Intel")),
    (40, PlacementTier.good, ("Infosys", "TCS", "Wipro", "Cognizant", "Accenture")),
)

NEEDS_IMPROVEMENT_ADVICE = ("Focus on improving your skills",)

IMPROVEMENT_SUGGESTIONS = (
    "Complete more mock tests to improve your technical skills",
    "Enroll in additional courses to broaden your knowledge",
    "Practice regularly and maintain detailed notes for revision",
)


@dataclass(frozen=True)
class ActivitySummary:
    tests_completed: int = 0
    average_score_percent: float = 0.0
    courses_completed_count: int = 0


@dataclass(frozen=True)
class PlacementResult:
    tier: PlacementTier
    recommended_companies: Tuple[str, ...]
    performance_score: float


def performance_score(summary: ActivitySummary) -> float:
    return (
        summary.tests_completed * TEST_WEIGHT
        + summary.average_score_percent * SCORE_WEIGHT
        + summary.courses_completed_count * COURSE_WEIGHT
    ) / 3


def predict(summary: ActivitySummary) -> PlacementResult:
    """
    Map an activity summary to exactly one tier.

    Every input lands in some band, so this never fails.
    """
    score = performance_score(summary)

    for lower_bound, tier, companies in TIER_TABLE:
        if score >= lower_bound:
            return PlacementResult(tier=tier, recommended_companies=companies, performance_score=score)

    return PlacementResult(
        tier=PlacementTier.needs_improvement,
        recommended_companies=NEEDS_IMPROVEMENT_ADVICE,
        performance_score=score
    )


def summarize_activity(
    tests: Iterable[TestRecord],
    course_progress: Iterable[Optional[int]]
) -> ActivitySummary:
    """
    Build the predictor input from one student's rows.

    Args:
        tests: The student's test attempts (rows with no questions are skipped)
        course_progress: Stored progress (0-100) of each enrollment

    Returns:
        ActivitySummary with the unrounded average percentage
    """
    percentages = [test.percentage for test in tests if test.is_valid]
    average = sum(percentages) / len(percentages) if percentages else 0.0

    courses_completed = sum(
        1 for progress in course_progress
        if (progress or 0) >= COURSE_COMPLETION_THRESHOLD
    )

    return ActivitySummary(
        tests_completed=len(percentages),
        average_score_percent=average,
        courses_completed_count=courses_completed
    )
