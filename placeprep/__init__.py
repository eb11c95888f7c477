"""
Placement Prep
Backend for a student placement-preparation dashboard.

Architecture:
- PostgreSQL: Structured rows (profiles, courses, enrollments, mock tests)
- MongoDB: Per-user documents (notes, assistant chat transcripts)
- Leaderboard + placement prediction: pure functions over fetched rows
- DeepSeek AI: Optional, placement assistant replies only
"""

__version__ = "1.0.0"
