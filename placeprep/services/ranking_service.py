"""
Leaderboard Ranking Service

PURPOSE:
Turn raw mock-test rows and profile rows into an ordered leaderboard,
plus the rank of the user who asked for it.

HOW IT WORKS:
1. Drop test rows with no questions (they cannot produce a percentage)
2. Group by user, summing per-test percentages (score / total * 100)
3. Attach display names from profiles ("Anonymous" when missing)
4. Average = round(sum / count)
5. Stable sort by average, highest first
6. rank = position + 1 (1, 2, 3, ... even for equal averages)

TIE-BREAK POLICY:
Users with the same average keep the order in which they first appear
in the test rows. Nothing else is compared.

Everything here is pure: no database access, no session state. The same
rows always produce the same leaderboard, so every request recomputes it.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

ANONYMOUS_NAME = "Anonymous"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3)."""
    rounded = math.floor(abs(value) + 0.5)
    return int(rounded) if value >= 0 else -int(rounded)


# ============================================================
# RECORDS
# ============================================================

@dataclass(frozen=True)
class TestRecord:
    """One completed mock-test attempt."""
    user_id: str
    score: int
    total_questions: int

    @property
    def is_valid(self) -> bool:
        return self.total_questions > 0

    @property
    def percentage(self) -> float:
        return self.score / self.total_questions * 100


@dataclass(frozen=True)
class ProfileRecord:
    user_id: str
    display_name: Optional[str] = None


@dataclass(frozen=True)
class LeaderboardEntry:
    """Single leaderboard row."""
    user_id: str
    display_name: str
    total_score_percent_sum: int
    tests_completed: int
    average_score: int
    rank: int


@dataclass(frozen=True)
class LeaderboardResult:
    entries: Tuple[LeaderboardEntry, ...]
    current_user_rank: Optional[int] = None


# ============================================================
# RANKING
# ============================================================

def _display_names(profiles: Iterable[ProfileRecord]) -> Dict[str, str]:
    names = {}
    for profile in profiles:
        # Later rows for the same user overwrite earlier ones
        names[profile.user_id] = profile.display_name or ANONYMOUS_NAME
    return names


def compute_leaderboard(
    tests: Iterable[TestRecord],
    profiles: Iterable[ProfileRecord],
    current_user_id: Optional[str] = None
) -> LeaderboardResult:
    """
    Build the leaderboard from every test row and profile row.

    Args:
        tests: All test attempts, in the order storage returned them
        profiles: All profiles (users without a profile show as "Anonymous")
        current_user_id: The viewer; their rank is reported separately

    Returns:
        LeaderboardResult with entries sorted by average score (highest first)
        and current_user_rank (None when the viewer has no valid tests)
    """
    # dict keeps first-appearance order, which is the tie-break order
    totals: Dict[str, float] = {}
    counts: Dict[str, int] = {}

    for test in tests:
        if not test.is_valid:
            continue
        totals[test.user_id] = totals.get(test.user_id, 0.0) + test.percentage
        counts[test.user_id] = counts.get(test.user_id, 0) + 1

    names = _display_names(profiles)

    aggregates = [
        (user_id, total, counts[user_id], round_half_up(total / counts[user_id]))
        for user_id, total in totals.items()
    ]
    # sorted() is stable, equal averages stay in encounter order
    aggregates = sorted(aggregates, key=lambda row: row[3], reverse=True)

    entries = tuple(
        LeaderboardEntry(
            user_id=user_id,
            display_name=names.get(user_id, ANONYMOUS_NAME),
            total_score_percent_sum=round_half_up(total),
            tests_completed=count,
            average_score=average,
            rank=index + 1
        )
        for index, (user_id, total, count, average) in enumerate(aggregates)
    )

    current_user_rank = None
    if current_user_id is not None:
        for entry in entries:
            if entry.user_id == current_user_id:
                current_user_rank = entry.rank
                break

    return LeaderboardResult(entries=entries, current_user_rank=current_user_rank)


def rank_badge(rank: int) -> Optional[str]:
    """Badge label for the top of the leaderboard."""
    if rank == 1:
        return "Champion"
    if rank <= 3:
        return "Top 3"
    if rank <= 10:
        return "Top 10"
    return None
