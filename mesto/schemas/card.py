"""Card schemas."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from mesto.schemas.common import ProfileText, Url


class CardCreate(BaseModel):
    """Create a new card."""

    model_config = ConfigDict(extra="forbid")

    name: ProfileText
    link: Url


class CardResponse(BaseModel):
    """Card response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    link: str
    owner: str = Field(validation_alias=AliasChoices("owner_id", "owner"))
    likes: list[str]
    created_at: datetime
