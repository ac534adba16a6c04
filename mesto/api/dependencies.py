"""FastAPI dependencies for authentication, services and resource lookups.

Lookups are chained request stages: each one takes what earlier stages
produced and either returns the next piece of context or raises a
``MestoError`` that short-circuits the request.
"""

import logging
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from mesto.config import Settings, get_settings
from mesto.database import get_db
from mesto.errors import ForbiddenError, InvalidTokenError, UnauthorizedError
from mesto.models.card import Card
from mesto.models.user import User
from mesto.schemas.common import CardId, UserId
from mesto.services.auth import TokenService
from mesto.services.cards import CardService
from mesto.services.users import UserService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
AUTHORIZATION_REQUIRED = "Authorization required"


def get_token_service(settings: Annotated[Settings, Depends(get_settings)]) -> TokenService:
    """Get token service bound to the application settings."""
    return TokenService(settings)


def get_user_service(db: Annotated[Session, Depends(get_db)]) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)


def get_card_service(db: Annotated[Session, Depends(get_db)]) -> CardService:
    """Get card service with dependencies."""
    return CardService(db)


def get_current_user_id(
    request: Request,
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> str:
    """Authorize the request from its bearer token and return the user id.

    The id is also stored on ``request.state.user_id``. Any failure is
    reported as "Authorization required" without the verification detail.
    """
    authorization = request.headers.get("Authorization")
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError(AUTHORIZATION_REQUIRED)

    token = authorization[len(BEARER_PREFIX) :]
    try:
        claim = token_service.verify(token)
    except InvalidTokenError as e:
        logger.debug(f"Rejected bearer token: {e}")
        raise UnauthorizedError(AUTHORIZATION_REQUIRED) from e

    request.state.user_id = claim.user_id
    return claim.user_id


def get_current_user(
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    """Load the authenticated user's record."""
    return service.get_user(user_id)


def get_user_by_path_id(
    user_id: UserId,
    service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    """Load the user named in the path. Runs only for a well-formed id."""
    return service.get_user(user_id)


def get_card_by_path_id(
    card_id: CardId,
    service: Annotated[CardService, Depends(get_card_service)],
) -> Card:
    """Load the card named in the path. Runs only for a well-formed id."""
    return service.get_card(card_id)


def get_owned_card(
    card: Annotated[Card, Depends(get_card_by_path_id)],
    user_id: Annotated[str, Depends(get_current_user_id)],
) -> Card:
    """Pass the card through only when the current user owns it."""
    if card.owner_id != user_id:
        raise ForbiddenError("Not enough permissions to delete this card")
    return card
