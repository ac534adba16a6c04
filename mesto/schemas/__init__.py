"""Pydantic schemas for request and response validation."""

from mesto.schemas.auth import SigninResponse, UserSignin, UserSignup
from mesto.schemas.card import CardCreate, CardResponse
from mesto.schemas.user import UserAvatarUpdate, UserProfileUpdate, UserResponse

__all__ = [
    "UserSignup",
    "UserSignin",
    "SigninResponse",
    "UserProfileUpdate",
    "UserAvatarUpdate",
    "UserResponse",
    "CardCreate",
    "CardResponse",
]
