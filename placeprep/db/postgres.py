"""
PostgreSQL Connection Utility

PostgreSQL stores the structured rows the dashboard reads:
- profiles      (display name, avatar)
- courses       (catalogue)
- user_courses  (enrollment + progress)
- mock_tests    (one row per completed attempt)

Schema: scripts/schema.sql
"""
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from contextlib import contextmanager
from placeprep.core.config import get_settings

settings = get_settings()

# pool_size=5 ready connections, max_overflow=10 extra under load
engine = create_engine(
    settings.postgres_url,
    pool_size=5,
    max_overflow=10,
    echo=settings.debug  # Log SQL queries in debug mode
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def get_db_session():
    """
    Context manager for database sessions.
    Commits on success, rolls back and re-raises on error.

    Usage:
        with get_db_session() as db:
            db.execute(text("SELECT * FROM mock_tests"))
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def test_postgres_connection() -> bool:
    """
    Test if PostgreSQL is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session() as db:
            row = db.execute(text("SELECT 1 as test")).fetchone()
            return row[0] == 1
    except Exception as e:
        print(f"PostgreSQL connection failed: {e}")
        return False


def execute_raw_sql(sql: str, params: dict = None) -> list:
    """
    Execute raw SQL and return results as list of dicts.
    """
    with get_db_session() as db:
        result = db.execute(text(sql), params or {})
        columns = result.keys()
        return [dict(zip(columns, row)) for row in result.fetchall()]
