"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from mesto.schemas.common import Password, ProfileText, Url


class UserSignup(BaseModel):
    """User registration request."""

    model_config = ConfigDict(extra="forbid")

    name: ProfileText | None = None
    about: ProfileText | None = None
    avatar: Url | None = None
    email: EmailStr = Field(..., max_length=255)
    password: Password

    @field_validator("name", "about", "avatar", mode="before")
    @classmethod
    def reject_null(cls, value):
        """Profile fields may be omitted but not sent as null."""
        if value is None:
            raise ValueError("must be a string")
        return value


class UserSignin(BaseModel):
    """User login request."""

    model_config = ConfigDict(extra="forbid")

    email: EmailStr = Field(..., max_length=255)
    password: Password


class SigninResponse(BaseModel):
    """Issued bearer token and the id of the signed-in user."""

    model_config = ConfigDict(populate_by_name=True)

    token: str
    user_id: str = Field(alias="userId")
