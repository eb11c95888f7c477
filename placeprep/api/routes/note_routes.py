"""
Note Routes

GET /notes - Own notes, newest first
POST /notes - Create note
PUT /notes/{note_id} - Update note
DELETE /notes/{note_id} - Delete note
"""

from typing import List

from fastapi import APIRouter, HTTPException, Depends

from placeprep.core.auth import get_current_user
from placeprep.services.mongo_service import NoteService
from placeprep.schemas.schemas import NoteCreate, NoteResponse, MessageResponse

router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get("", response_model=List[NoteResponse])
async def list_notes(user: dict = Depends(get_current_user)):
    return [NoteResponse(**n) for n in NoteService().list_for_user(user["user_id"])]


@router.post("", response_model=NoteResponse, status_code=201)
async def create_note(note: NoteCreate, user: dict = Depends(get_current_user)):
    doc = NoteService().create(user["user_id"], note.title, note.content)
    return NoteResponse(**doc)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(note_id: str, note: NoteCreate, user: dict = Depends(get_current_user)):
    doc = NoteService().update(user["user_id"], note_id, note.title, note.content)
    if not doc:
        raise HTTPException(status_code=404, detail="Note not found")
    return NoteResponse(**doc)


@router.delete("/{note_id}", response_model=MessageResponse)
async def delete_note(note_id: str, user: dict = Depends(get_current_user)):
    if not NoteService().delete(user["user_id"], note_id):
        raise HTTPException(status_code=404, detail="Note not found")
    return MessageResponse(message="Note deleted")
