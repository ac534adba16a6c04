"""Card service: posting, deleting and liking cards."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from mesto.errors import NotFoundError
from mesto.models.card import Card
from mesto.models.user import User

logger = logging.getLogger(__name__)


class CardService:
    """Service for card-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def list_cards(self) -> list[Card]:
        return (
            self.db.query(Card)
            .options(selectinload(Card.liked_by))
            .order_by(Card.created_at)
            .all()
        )

    def get_card(self, card_id: str) -> Card:
        """Get a card by id or raise NotFoundError."""
        card = self.db.get(Card, card_id)
        if card is None:
            raise NotFoundError("Requested card not found")
        return card

    def create_card(self, owner_id: str, name: str, link: str) -> Card:
        card = Card(name=name, link=link, owner_id=owner_id)
        self.db.add(card)
        self.db.commit()
        self.db.refresh(card)
        logger.info(f"User {owner_id} created card {card.id}")
        return card

    def delete_card(self, card: Card) -> None:
        """Delete a card along with its likes.

        Ownership is checked by the caller before this point.
        """
        card_id = card.id
        self.db.delete(card)
        self.db.commit()
        logger.info(f"Deleted card {card_id}")

    def like_card(self, card: Card, user_id: str) -> Card:
        """Add a like from ``user_id``. Liking twice keeps a single like."""
        card.liked_by.add(self._get_liker(user_id))
        try:
            self.db.commit()
        except IntegrityError:
            # Same like stored by a concurrent request
            self.db.rollback()
            logger.info(f"Like from {user_id} on card {card.id} already stored")
        self.db.refresh(card)
        return card

    def unlike_card(self, card: Card, user_id: str) -> Card:
        """Remove the like from ``user_id`` if there is one."""
        card.liked_by.discard(self._get_liker(user_id))
        self.db.commit()
        self.db.refresh(card)
        return card

    def _get_liker(self, user_id: str) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise NotFoundError("Requested user not found")
        return user
