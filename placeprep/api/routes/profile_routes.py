"""
Profile Routes

GET /profile - Get own profile
PUT /profile - Update display name / avatar URL (creates the row on first save)
"""

from fastapi import APIRouter, HTTPException, Depends

from placeprep.core.auth import get_current_user
from placeprep.services import data_service
from placeprep.schemas.schemas import ProfileUpdate, ProfileResponse, MessageResponse

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", response_model=ProfileResponse)
async def get_profile(user: dict = Depends(get_current_user)):
    """Own profile. Users who never saved one get an empty profile."""
    row = data_service.get_profile(user["user_id"])
    if not row:
        return ProfileResponse(user_id=user["user_id"], email=user.get("email"))

    return ProfileResponse(
        user_id=row["user_id"], full_name=row["full_name"],
        email=row["email"] or user.get("email"), avatar_url=row["avatar_url"]
    )


@router.put("", response_model=MessageResponse)
async def update_profile(data: ProfileUpdate, user: dict = Depends(get_current_user)):
    """Update profile. Only provided fields are changed."""
    if data.full_name is None and data.avatar_url is None:
        raise HTTPException(status_code=400, detail="No fields to update")

    data_service.upsert_profile(
        user_id=user["user_id"],
        full_name=data.full_name,
        avatar_url=data.avatar_url,
        email=user.get("email")
    )
    return MessageResponse(message="Profile updated successfully")
