"""
Placement Prep - Main Application

FastAPI backend with:
- PostgreSQL for profiles, courses, enrollments and mock tests
- MongoDB for notes and assistant chat history
- Leaderboard ranking and rule-based placement prediction
- JWT verification for tokens issued by the external auth provider

Run: uvicorn placeprep.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from placeprep.api.routes import api_router
from placeprep.db.mongodb import init_mongo_indexes
from placeprep.core.config import get_settings

settings = get_settings()

app = FastAPI(
    title="Placement Prep",
    description="""
    Backend for a student placement-preparation dashboard.

    ## Features
    - **Courses**: Catalogue, enrollment and module progress
    - **Mock Tests**: Question bank, grading and test history
    - **Leaderboard**: Ranking by average test score
    - **Placement**: Rule-based readiness tier and company suggestions
    - **Notes**: Personal study notes
    - **Assistant**: Placement preparation chat

    ## Databases
    - PostgreSQL: profiles, courses, user_courses, mock_tests
    - MongoDB: notes, chat_messages
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.on_event("startup")
async def startup_event():
    """Initialize MongoDB indexes on startup."""
    try:
        init_mongo_indexes()
        print("✅ MongoDB indexes initialized")
    except Exception as e:
        print(f"⚠️ MongoDB index initialization failed: {e}")


@app.get("/", tags=["Health"])
async def root():
    return {"status": "healthy", "app": "Placement Prep"}


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    from placeprep.db.postgres import test_postgres_connection
    from placeprep.db.mongodb import test_mongo_connection

    return {
        "status": "healthy",
        "postgres": "connected" if test_postgres_connection() else "disconnected",
        "mongodb": "connected" if test_mongo_connection() else "disconnected"
    }
