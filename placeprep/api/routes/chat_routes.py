"""
Chat Routes

POST /chat - Ask the placement assistant
GET /chat/history - Greeting plus stored conversation
DELETE /chat/history - Clear own conversation
"""

from fastapi import APIRouter, Depends

from placeprep.core.auth import get_current_user
from placeprep.services.chat_service import GREETING, get_placement_assistant
from placeprep.services.mongo_service import ChatHistoryService
from placeprep.schemas.schemas import (
    ChatRequest, ChatMessageResponse, ChatHistoryResponse, MessageResponse
)

router = APIRouter(prefix="/chat", tags=["Assistant"])

# Turns of context passed to the model
HISTORY_CONTEXT = 10


def _to_response(doc: dict) -> ChatMessageResponse:
    return ChatMessageResponse(
        role=doc["role"], content=doc["content"],
        source=doc.get("source"), created_at=doc["created_at"]
    )


@router.post("", response_model=ChatMessageResponse)
async def chat(request: ChatRequest, user: dict = Depends(get_current_user)):
    """
    Send a message and get the assistant's reply.
    Both turns are saved to the user's history.
    """
    history_service = ChatHistoryService()
    context = [
        {"role": m["role"], "content": m["content"]}
        for m in history_service.history(user["user_id"], limit=HISTORY_CONTEXT)
    ]

    reply = get_placement_assistant().reply(request.message, context)

    history_service.append(user["user_id"], "user", request.message)
    doc = history_service.append(user["user_id"], "assistant", reply.content, source=reply.source)
    return _to_response(doc)


@router.get("/history", response_model=ChatHistoryResponse)
async def chat_history(user: dict = Depends(get_current_user)):
    messages = ChatHistoryService().history(user["user_id"])
    return ChatHistoryResponse(greeting=GREETING, messages=[_to_response(m) for m in messages])


@router.delete("/history", response_model=MessageResponse)
async def clear_history(user: dict = Depends(get_current_user)):
    deleted = ChatHistoryService().clear(user["user_id"])
    return MessageResponse(message=f"Deleted {deleted} messages")
