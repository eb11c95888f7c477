"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from placeprep.api.routes.profile_routes import router as profile_router
from placeprep.api.routes.course_routes import router as course_router
from placeprep.api.routes.mock_test_routes import router as mock_test_router
from placeprep.api.routes.leaderboard_routes import router as leaderboard_router
from placeprep.api.routes.placement_routes import router as placement_router
from placeprep.api.routes.note_routes import router as note_router
from placeprep.api.routes.chat_routes import router as chat_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(profile_router)
api_router.include_router(course_router)
api_router.include_router(mock_test_router)
api_router.include_router(leaderboard_router)
api_router.include_router(placement_router)
api_router.include_router(note_router)
api_router.include_router(chat_router)
