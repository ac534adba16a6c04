"""User schemas."""

from pydantic import BaseModel, ConfigDict

from mesto.schemas.common import ProfileText, Url


class UserProfileUpdate(BaseModel):
    """Update name and about of the current user."""

    model_config = ConfigDict(extra="forbid")

    name: ProfileText
    about: ProfileText


class UserAvatarUpdate(BaseModel):
    """Update the avatar of the current user."""

    model_config = ConfigDict(extra="forbid")

    avatar: Url


class UserResponse(BaseModel):
    """Public user information. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    about: str
    avatar: str
    email: str
