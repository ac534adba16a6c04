"""SQLAlchemy models."""

from mesto.models.card import Card, card_likes
from mesto.models.user import User

__all__ = [
    "User",
    "Card",
    "card_likes",
]
