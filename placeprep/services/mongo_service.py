"""
MongoDB Service - CRUD operations for document collections.

Collections in this database:
1. notes          - Student notes (title + content), owned by one user
2. chat_messages  - Placement assistant transcript, one document per turn

Every query is scoped by user_id so one student can never read or change
another student's documents.
"""

from datetime import datetime
from typing import Optional, List
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.collection import Collection

from placeprep.db.mongodb import get_collection, COLLECTIONS


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["id"] = str(doc.pop("_id"))
    return doc


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def _object_id(mongo_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(mongo_id)
    except (InvalidId, TypeError):
        return None


# ============================================================
# NOTES COLLECTION
# ============================================================

class NoteService:
    """
    Handles student notes.
    """

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["notes"])

    def create(self, user_id: str, title: str, content: str) -> dict:
        now = datetime.utcnow()
        doc = {
            "user_id": user_id,
            "title": title,
            "content": content,
            "created_at": now,
            "updated_at": now
        }
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return serialize_doc(doc)

    def list_for_user(self, user_id: str) -> List[dict]:
        """All notes for a user, newest first."""
        cursor = self.collection.find({"user_id": user_id}).sort("created_at", -1)
        return serialize_docs(list(cursor))

    def update(self, user_id: str, note_id: str, title: str, content: str) -> Optional[dict]:
        """Returns the updated note, or None if it doesn't exist for this user."""
        oid = _object_id(note_id)
        if oid is None:
            return None
        doc = self.collection.find_one_and_update(
            {"_id": oid, "user_id": user_id},
            {"$set": {"title": title, "content": content, "updated_at": datetime.utcnow()}},
            return_document=ReturnDocument.AFTER
        )
        return serialize_doc(doc)

    def delete(self, user_id: str, note_id: str) -> bool:
        oid = _object_id(note_id)
        if oid is None:
            return False
        result = self.collection.delete_one({"_id": oid, "user_id": user_id})
        return result.deleted_count > 0

    def count_for_user(self, user_id: str) -> int:
        return self.collection.count_documents({"user_id": user_id})


# ============================================================
# CHAT MESSAGES COLLECTION
# ============================================================

class ChatHistoryService:
    """
    Stores assistant conversations, one document per message.
    """

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["chat_messages"])

    def append(self, user_id: str, role: str, content: str, source: Optional[str] = None) -> dict:
        doc = {
            "user_id": user_id,
            "role": role,  # "user" | "assistant"
            "content": content,
            "source": source,
            "created_at": datetime.utcnow()
        }
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return serialize_doc(doc)

    def history(self, user_id: str, limit: int = 50) -> List[dict]:
        """Most recent `limit` messages, returned oldest first."""
        cursor = (
            self.collection.find({"user_id": user_id})
            .sort("created_at", -1)
            .limit(limit)
        )
        return list(reversed(serialize_docs(list(cursor))))

    def clear(self, user_id: str) -> int:
        result = self.collection.delete_many({"user_id": user_id})
        return result.deleted_count
