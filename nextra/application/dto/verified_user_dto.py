from typing import Optional

from pydantic import BaseModel


class VerifiedUserResponse(BaseModel):
    """DTO for a verified user"""
    name: str
    role: str
    photo: str  # public reference, e.g. "/uploads/1735036200000-alice.jpg"


class VerifiedUserSavedResponse(BaseModel):
    """DTO returned after a verified user is added"""
    message: str
    user: VerifiedUserResponse


class VerifiedUserRemovedResponse(BaseModel):
    """DTO returned after a delete-by-name"""
    message: str


class CheckUserRequest(BaseModel):
    """DTO for a name match check"""
    name: Optional[str] = None


class CheckUserResponse(BaseModel):
    """DTO for the result of a name match check"""
    verified: bool
    user: Optional[VerifiedUserResponse] = None
