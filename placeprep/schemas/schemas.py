"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


# ============================================================
# PROFILE SCHEMAS
# ============================================================

class ProfileUpdate(BaseModel):
    full_name: Optional[str] = Field(None, min_length=1, max_length=100)
    avatar_url: Optional[str] = None

class ProfileResponse(BaseModel):
    user_id: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None


# ============================================================
# COURSE SCHEMAS
# ============================================================

class CourseResponse(BaseModel):
    course_id: str
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    duration: Optional[str] = None
    level: Optional[str] = None
    image_url: Optional[str] = None

class CourseModule(BaseModel):
    index: int
    title: str
    duration: str
    completed: bool = False

class CourseDetailResponse(CourseResponse):
    enrolled: bool = False
    progress: int = 0
    modules: List[CourseModule] = []

class ProgressResponse(BaseModel):
    course_id: str
    progress: int

class DashboardResponse(BaseModel):
    enrolled: int
    tests_completed: int
    progress_points: int
    courses: List[CourseResponse] = []


# ============================================================
# MOCK TEST SCHEMAS
# ============================================================

class QuestionResponse(BaseModel):
    index: int
    question: str
    options: List[str]

class TestSubmission(BaseModel):
    answers: List[Optional[int]] = Field(default_factory=list)
    duration_minutes: Optional[int] = Field(None, ge=0)

class TestResultResponse(BaseModel):
    test_id: int
    test_name: str
    score: int
    total_questions: int
    percentage: int
    band: str
    duration_minutes: int
    completed_at: datetime

class HistoryStatsResponse(BaseModel):
    total_tests: int
    average_score: int
    best_score: int
    total_minutes: int

class TestHistoryResponse(BaseModel):
    stats: HistoryStatsResponse
    tests: List[TestResultResponse]


# ============================================================
# LEADERBOARD SCHEMAS
# ============================================================

class LeaderboardEntryResponse(BaseModel):
    rank: int
    user_id: str
    display_name: str
    total_score: int
    tests_completed: int
    average_score: int
    badge: Optional[str] = None
    is_current_user: bool = False

class LeaderboardResponse(BaseModel):
    entries: List[LeaderboardEntryResponse]
    current_user_rank: Optional[int] = None
    total_users: int


# ============================================================
# PLACEMENT SCHEMAS
# ============================================================

class PlacementStats(BaseModel):
    tests_completed: int
    average_score: int
    courses_completed: int
    notes_count: int

class PlacementPredictionResponse(BaseModel):
    prediction: str
    performance_score: float
    recommended_companies: List[str]
    suggestions: List[str]
    stats: PlacementStats


# ============================================================
# NOTES SCHEMAS
# ============================================================

class NoteCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)

class NoteResponse(BaseModel):
    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime


# ============================================================
# CHAT SCHEMAS
# ============================================================

class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=2000)

class ChatMessageResponse(BaseModel):
    role: str
    content: str
    source: Optional[str] = None
    created_at: datetime

class ChatHistoryResponse(BaseModel):
    greeting: str
    messages: List[ChatMessageResponse]


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True
