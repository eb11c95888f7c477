"""
MongoDB Connection Utility

MongoDB stores:
- Student notes (free-form title + content)
- Placement assistant chat transcripts

Both are per-user documents with no joins, so they live outside PostgreSQL.
"""
from pymongo import MongoClient, ASCENDING, DESCENDING
from pymongo.database import Database
from pymongo.collection import Collection
from placeprep.core.config import get_settings

settings = get_settings()

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(settings.mongodb_uri)
    return _client


def get_mongo_db() -> Database:
    """Get the placeprep_docs database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    """
    Get a specific collection.
    Collections we use:
    - notes: student notes
    - chat_messages: assistant transcripts
    """
    db = get_mongo_db()
    return db[name]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        client.admin.command('ping')
        return True
    except Exception as e:
        print(f"MongoDB connection failed: {e}")
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "notes": "notes",
    "chat_messages": "chat_messages"
}


def init_mongo_indexes():
    """
    Create indexes for per-user listing.
    Call this once during app startup.
    """
    db = get_mongo_db()

    # Notes are listed newest first per user
    db[COLLECTIONS["notes"]].create_index([
        ("user_id", ASCENDING),
        ("created_at", DESCENDING)
    ])

    # Chat history is replayed oldest first per user
    db[COLLECTIONS["chat_messages"]].create_index([
        ("user_id", ASCENDING),
        ("created_at", ASCENDING)
    ])

    print("MongoDB indexes created successfully")
