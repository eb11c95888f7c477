"""
Course Routes

GET /courses - Course catalogue
GET /courses/dashboard - Enrollment / test counters for the dashboard
GET /courses/{course_id} - Course details with modules and own progress
POST /courses/{course_id}/enroll - Enroll (progress starts at 0)
POST /courses/{course_id}/modules/{module_index}/complete - Mark modules up to index done
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Depends, Query

from placeprep.core.auth import get_current_user
from placeprep.services import data_service
from placeprep.services.analytics_service import COURSE_MODULES, dashboard_stats, module_progress
from placeprep.services.ranking_service import round_half_up
from placeprep.schemas.schemas import (
    CourseResponse, CourseDetailResponse, CourseModule, ProgressResponse,
    DashboardResponse, MessageResponse
)

router = APIRouter(prefix="/courses", tags=["Courses"])

DASHBOARD_COURSE_COUNT = 4


def _modules_for(progress: int) -> List[CourseModule]:
    done = round_half_up(progress * len(COURSE_MODULES) / 100)
    return [
        CourseModule(index=i, title=m["title"], duration=m["duration"], completed=i < done)
        for i, m in enumerate(COURSE_MODULES)
    ]


@router.get("", response_model=List[CourseResponse])
async def list_courses(limit: Optional[int] = Query(None, ge=1, le=100)):
    """List courses. Public."""
    return [CourseResponse(**c) for c in data_service.list_courses(limit)]


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(user: dict = Depends(get_current_user)):
    """Counters and featured courses for the dashboard."""
    user_id = user["user_id"]
    stats = dashboard_stats(
        data_service.fetch_user_course_progress(user_id),
        tests_completed=len(data_service.fetch_user_tests(user_id))
    )
    courses = data_service.list_courses(DASHBOARD_COURSE_COUNT)

    return DashboardResponse(
        enrolled=stats.enrolled,
        tests_completed=stats.tests_completed,
        progress_points=stats.progress_points,
        courses=[CourseResponse(**c) for c in courses]
    )


@router.get("/{course_id}", response_model=CourseDetailResponse)
async def get_course(course_id: str, user: dict = Depends(get_current_user)):
    course = data_service.get_course(course_id)
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")

    enrollment = data_service.get_enrollment(user["user_id"], course_id)
    progress = (enrollment["progress"] or 0) if enrollment else 0

    return CourseDetailResponse(
        **course,
        enrolled=enrollment is not None,
        progress=progress,
        modules=_modules_for(progress)
    )


@router.post("/{course_id}/enroll", response_model=MessageResponse, status_code=201)
async def enroll(course_id: str, user: dict = Depends(get_current_user)):
    if not data_service.get_course(course_id):
        raise HTTPException(status_code=404, detail="Course not found")

    if not data_service.enroll(user["user_id"], course_id):
        raise HTTPException(status_code=400, detail="Already enrolled in this course")

    return MessageResponse(message="Enrolled successfully")


@router.post("/{course_id}/modules/{module_index}/complete", response_model=ProgressResponse)
async def complete_module(course_id: str, module_index: int, user: dict = Depends(get_current_user)):
    """
    Completing module N sets progress to (N + 1) / total modules, rounded.
    """
    if module_index < 0 or module_index >= len(COURSE_MODULES):
        raise HTTPException(status_code=400, detail="Invalid module index")

    progress = module_progress(module_index + 1)

    if not data_service.update_progress(user["user_id"], course_id, progress):
        raise HTTPException(status_code=404, detail="Not enrolled in this course")

    return ProgressResponse(course_id=course_id, progress=progress)
