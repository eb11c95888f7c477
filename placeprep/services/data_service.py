"""
PostgreSQL Data Service - reads and writes for the dashboard tables.

This is the data-access side of the leaderboard and placement prediction:
it turns rows into the plain records the pure services consume and never
computes rankings or tiers itself.

Tables (scripts/schema.sql):
- profiles      user_id, full_name, email, avatar_url
- courses       course_id, title, description, category, duration, level, image_url
- user_courses  user_id, course_id, progress (0-100)
- mock_tests    test_id, user_id, test_name, score, total_questions, duration_minutes, completed_at
"""

from typing import List, Optional
from sqlalchemy import text

from placeprep.db.postgres import get_db_session, execute_raw_sql
from placeprep.services.ranking_service import TestRecord, ProfileRecord


# ============================================================
# MOCK TESTS
# ============================================================

def fetch_all_test_records() -> List[TestRecord]:
    """
    Every test attempt, in insertion order.
    Insertion order is the leaderboard's tie-break order.
    """
    rows = execute_raw_sql(
        "SELECT user_id, score, total_questions FROM mock_tests ORDER BY test_id"
    )
    return [
        TestRecord(user_id=r["user_id"], score=r["score"], total_questions=r["total_questions"])
        for r in rows
    ]


def fetch_user_tests(user_id: str) -> List[dict]:
    """One user's attempts, newest first."""
    return execute_raw_sql("""
        SELECT test_id, test_name, score, total_questions, duration_minutes, completed_at
        FROM mock_tests WHERE user_id = :id
        ORDER BY completed_at DESC, test_id DESC
    """, {"id": user_id})


def to_test_records(user_id: str, rows: List[dict]) -> List[TestRecord]:
    return [
        TestRecord(user_id=user_id, score=r["score"], total_questions=r["total_questions"])
        for r in rows
    ]


def insert_mock_test(
    user_id: str,
    test_name: str,
    score: int,
    total_questions: int,
    duration_minutes: int
) -> dict:
    with get_db_session() as db:
        result = db.execute(
            text("""
                INSERT INTO mock_tests (user_id, test_name, score, total_questions, duration_minutes)
                VALUES (:user_id, :test_name, :score, :total, :duration)
                RETURNING test_id, completed_at
            """),
            {
                "user_id": user_id, "test_name": test_name, "score": score,
                "total": total_questions, "duration": duration_minutes
            }
        )
        test_id, completed_at = result.fetchone()

    return {
        "test_id": test_id, "test_name": test_name, "score": score,
        "total_questions": total_questions, "duration_minutes": duration_minutes,
        "completed_at": completed_at
    }


# ============================================================
# PROFILES
# ============================================================

def fetch_all_profiles() -> List[ProfileRecord]:
    rows = execute_raw_sql("SELECT user_id, full_name FROM profiles")
    return [ProfileRecord(user_id=r["user_id"], display_name=r["full_name"]) for r in rows]


def get_profile(user_id: str) -> Optional[dict]:
    rows = execute_raw_sql(
        "SELECT user_id, full_name, email, avatar_url, created_at FROM profiles WHERE user_id = :id",
        {"id": user_id}
    )
    return rows[0] if rows else None


def upsert_profile(user_id: str, full_name: Optional[str], avatar_url: Optional[str], email: Optional[str] = None) -> None:
    """Create the profile row on first save, otherwise update name/avatar."""
    with get_db_session() as db:
        db.execute(
            text("""
                INSERT INTO profiles (user_id, full_name, email, avatar_url)
                VALUES (:id, :full_name, :email, :avatar_url)
                ON CONFLICT (user_id) DO UPDATE SET
                    full_name = COALESCE(EXCLUDED.full_name, profiles.full_name),
                    avatar_url = COALESCE(EXCLUDED.avatar_url, profiles.avatar_url),
                    email = COALESCE(EXCLUDED.email, profiles.email),
                    updated_at = CURRENT_TIMESTAMP
            """),
            {"id": user_id, "full_name": full_name, "email": email, "avatar_url": avatar_url}
        )


# ============================================================
# COURSES & ENROLLMENT
# ============================================================

COURSE_COLUMNS = "course_id, title, description, category, duration, level, image_url"


def list_courses(limit: Optional[int] = None) -> List[dict]:
    sql = f"SELECT {COURSE_COLUMNS} FROM courses ORDER BY created_at, course_id"
    params = {}
    if limit is not None:
        sql += " LIMIT :limit"
        params["limit"] = limit
    return execute_raw_sql(sql, params)


def get_course(course_id: str) -> Optional[dict]:
    rows = execute_raw_sql(
        f"SELECT {COURSE_COLUMNS} FROM courses WHERE course_id = :id",
        {"id": course_id}
    )
    return rows[0] if rows else None


def get_enrollment(user_id: str, course_id: str) -> Optional[dict]:
    rows = execute_raw_sql(
        "SELECT progress, enrolled_at FROM user_courses WHERE user_id = :uid AND course_id = :cid",
        {"uid": user_id, "cid": course_id}
    )
    return rows[0] if rows else None


def enroll(user_id: str, course_id: str) -> bool:
    """Returns False if the user was already enrolled."""
    with get_db_session() as db:
        result = db.execute(
            text("""
                INSERT INTO user_courses (user_id, course_id, progress)
                VALUES (:uid, :cid, 0)
                ON CONFLICT (user_id, course_id) DO NOTHING
            """),
            {"uid": user_id, "cid": course_id}
        )
        return result.rowcount > 0


def update_progress(user_id: str, course_id: str, progress: int) -> bool:
    """Returns False if the user isn't enrolled in the course."""
    with get_db_session() as db:
        result = db.execute(
            text("""
                UPDATE user_courses SET progress = :progress
                WHERE user_id = :uid AND course_id = :cid
            """),
            {"uid": user_id, "cid": course_id, "progress": progress}
        )
        return result.rowcount > 0


def fetch_user_course_progress(user_id: str) -> List[Optional[int]]:
    rows = execute_raw_sql(
        "SELECT progress FROM user_courses WHERE user_id = :id",
        {"id": user_id}
    )
    return [r["progress"] for r in rows]
