"""Card model and the likes association table."""

from sqlalchemy import Column, ForeignKey, String, Table
from sqlalchemy.orm import relationship

from mesto.database import Base
from mesto.models.mixins import OBJECT_ID_LENGTH, ObjectIdMixin, TimestampMixin

# Composite primary key: a user can like a card at most once
card_likes = Table(
    "card_likes",
    Base.metadata,
    Column("card_id", String(OBJECT_ID_LENGTH), ForeignKey("cards.id"), primary_key=True),
    Column("user_id", String(OBJECT_ID_LENGTH), ForeignKey("users.id"), primary_key=True),
)


class Card(Base, ObjectIdMixin, TimestampMixin):
    """Photo post owned by a user and liked by any number of users."""

    __tablename__ = "cards"

    name = Column(String(30), nullable=False)
    link = Column(String(2048), nullable=False)
    owner_id = Column(String(OBJECT_ID_LENGTH), ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    owner = relationship("User", backref="cards")
    liked_by = relationship("User", secondary=card_likes, collection_class=set)

    @property
    def likes(self) -> list[str]:
        """IDs of the users who liked this card."""
        return sorted(user.id for user in self.liked_by)
