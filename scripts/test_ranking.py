#!/usr/bin/env python3
"""
Leaderboard Ranking Test Script

Tests:
1. End-to-end leaderboard example
2. Missing profile fallback
3. Rank density and sort order
4. Tie stability
5. Zero-question guard
6. Empty input and absent current user
7. Determinism

No database needed - the ranking service is pure.

Run: python scripts/test_ranking.py   (or: pytest scripts)
"""
import sys
sys.path.insert(0, '.')

from placeprep.services.ranking_service import (
    TestRecord,
    ProfileRecord,
    compute_leaderboard,
    rank_badge,
    round_half_up,
    ANONYMOUS_NAME
)


def test_end_to_end_example():
    """Two users, three tests."""
    print("\n[1] Testing end-to-end leaderboard...")

    tests = [TestRecord("u1", 8, 10), TestRecord("u2", 9, 10), TestRecord("u1", 7, 10)]
    profiles = [ProfileRecord("u1", "Alice"), ProfileRecord("u2", "Bob")]

    result = compute_leaderboard(tests, profiles, current_user_id="u1")
    bob, alice = result.entries

    print(f"    {bob.rank}. {bob.display_name} {bob.average_score}%")
    print(f"    {alice.rank}. {alice.display_name} {alice.average_score}%")

    assert (bob.display_name, bob.rank, bob.average_score) == ("Bob", 1, 90)
    assert (alice.display_name, alice.rank, alice.average_score) == ("Alice", 2, 75)
    assert alice.tests_completed == 2
    assert alice.total_score_percent_sum == 150
    assert bob.tests_completed == 1
    assert result.current_user_rank == 2
    print("    ✅ Leaderboard matches expected order")


def test_missing_profile_uses_anonymous():
    print("\n[2] Testing missing profile...")

    result = compute_leaderboard([TestRecord("u3", 5, 10)], [], current_user_id="u3")
    entry = result.entries[0]

    assert entry.display_name == ANONYMOUS_NAME == "Anonymous"
    assert entry.rank == 1
    assert entry.average_score == 50
    assert result.current_user_rank == 1

    # Profile present but with no name
    result = compute_leaderboard([TestRecord("u4", 1, 2)], [ProfileRecord("u4", None)])
    assert result.entries[0].display_name == "Anonymous"
    result = compute_leaderboard([TestRecord("u4", 1, 2)], [ProfileRecord("u4", "")])
    assert result.entries[0].display_name == "Anonymous"
    print("    ✅ Fallback name applied")


def test_profiles_for_users_without_tests_are_ignored():
    result = compute_leaderboard([TestRecord("u1", 1, 1)], [ProfileRecord("u1", "A"), ProfileRecord("u9", "Z")])
    assert [e.user_id for e in result.entries] == ["u1"]


def test_duplicate_profile_last_wins():
    profiles = [ProfileRecord("u1", "Old Name"), ProfileRecord("u1", "New Name")]
    result = compute_leaderboard([TestRecord("u1", 3, 4)], profiles)
    assert result.entries[0].display_name == "New Name"


def test_rank_density_and_sort_order():
    print("\n[3] Testing rank density and sort order...")

    tests = [
        TestRecord("a", 3, 10), TestRecord("b", 10, 10), TestRecord("c", 6, 10),
        TestRecord("d", 6, 10), TestRecord("e", 1, 10), TestRecord("a", 9, 10),
    ]
    result = compute_leaderboard(tests, [])
    ranks = [e.rank for e in result.entries]
    averages = [e.average_score for e in result.entries]

    print(f"    ranks={ranks} averages={averages}")
    assert ranks == list(range(1, 6))
    assert all(averages[i] >= averages[i + 1] for i in range(len(averages) - 1))
    print("    ✅ Ranks are 1..N and averages non-increasing")


def test_tie_stability():
    """Equal averages keep first-appearance order and still get distinct ranks."""
    print("\n[4] Testing tie stability...")

    tests = [TestRecord("late", 1, 2), TestRecord("early", 5, 10), TestRecord("late", 1, 2)]
    result = compute_leaderboard(tests, [])
    assert [e.user_id for e in result.entries] == ["late", "early"]
    assert [e.rank for e in result.entries] == [1, 2]

    tests = [TestRecord("x", 7, 10), TestRecord("y", 7, 10), TestRecord("z", 7, 10)]
    result = compute_leaderboard(tests, [])
    assert [e.user_id for e in result.entries] == ["x", "y", "z"]
    assert [e.rank for e in result.entries] == [1, 2, 3]
    print("    ✅ Ties resolved by encounter order")


def test_zero_question_records_are_skipped():
    print("\n[5] Testing zero-question guard...")

    tests = [TestRecord("u1", 0, 0), TestRecord("u2", 4, 5), TestRecord("u2", 3, 0), TestRecord("u3", 1, -1)]
    result = compute_leaderboard(tests, [], current_user_id="u1")

    assert [e.user_id for e in result.entries] == ["u2"]
    assert result.entries[0].tests_completed == 1
    assert result.entries[0].average_score == 80
    assert result.current_user_rank is None
    print("    ✅ Invalid rows dropped without error")


def test_empty_input():
    print("\n[6] Testing empty input...")

    result = compute_leaderboard([], [ProfileRecord("u1", "Alice")], current_user_id="u1")
    assert result.entries == ()
    assert result.current_user_rank is None

    result = compute_leaderboard([TestRecord("u1", 1, 1)], [], current_user_id="someone-else")
    assert result.current_user_rank is None

    result = compute_leaderboard([TestRecord("u1", 1, 1)], [])
    assert result.current_user_rank is None
    print("    ✅ Empty leaderboard, no rank")


def test_average_uses_unrounded_sum():
    # 1/3 + 1/3 + 1/3 of 100 -> each 33.33..., sum 100, average 33
    tests = [TestRecord("u", 1, 3)] * 3
    entry = compute_leaderboard(tests, []).entries[0]
    assert entry.total_score_percent_sum == 100
    assert entry.average_score == 33

    # 2/3 -> 66.67 rounds to 67
    entry = compute_leaderboard([TestRecord("u", 2, 3)], []).entries[0]
    assert entry.average_score == 67


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(74.5) == 75
    assert round_half_up(74.49) == 74
    assert round_half_up(-2.5) == -3
    assert round_half_up(0) == 0


def test_determinism():
    print("\n[7] Testing determinism...")

    tests = [TestRecord("u1", 8, 10), TestRecord("u2", 9, 10), TestRecord("u1", 7, 10)]
    profiles = [ProfileRecord("u1", "Alice"), ProfileRecord("u2", "Bob")]
    first = compute_leaderboard(tests, profiles, "u2")
    second = compute_leaderboard(list(tests), list(profiles), "u2")
    assert first == second
    print("    ✅ Same input, same output")


def test_accepts_generators():
    tests = (TestRecord(u, 1, 2) for u in ["a", "b"])
    profiles = (ProfileRecord(u, u.upper()) for u in ["a", "b"])
    result = compute_leaderboard(tests, profiles, "b")
    assert [e.display_name for e in result.entries] == ["A", "B"]
    assert result.current_user_rank == 2


def test_rank_badges():
    assert rank_badge(1) == "Champion"
    assert rank_badge(2) == "Top 3"
    assert rank_badge(3) == "Top 3"
    assert rank_badge(4) == "Top 10"
    assert rank_badge(10) == "Top 10"
    assert rank_badge(11) is None


def main():
    print("=" * 50)
    print("LEADERBOARD RANKING TESTS")
    print("=" * 50)

    test_end_to_end_example()
    test_missing_profile_uses_anonymous()
    test_profiles_for_users_without_tests_are_ignored()
    test_duplicate_profile_last_wins()
    test_rank_density_and_sort_order()
    test_tie_stability()
    test_zero_question_records_are_skipped()
    test_empty_input()
    test_average_uses_unrounded_sum()
    test_round_half_up()
    test_determinism()
    test_accepts_generators()
    test_rank_badges()

    print("\n" + "=" * 50)
    print("All ranking tests passed!")
    print("=" * 50)


if __name__ == "__main__":
    main()
