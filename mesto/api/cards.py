"""Card API endpoints. All routes require a bearer token."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from mesto.api.dependencies import (
    get_card_by_path_id,
    get_card_service,
    get_current_user_id,
    get_owned_card,
)
from mesto.models.card import Card
from mesto.schemas.card import CardCreate, CardResponse
from mesto.services.cards import CardService

router = APIRouter(prefix="/cards", tags=["cards"], dependencies=[Depends(get_current_user_id)])


@router.get("", response_model=list[CardResponse])
async def get_cards(service: Annotated[CardService, Depends(get_card_service)]):
    """Get all cards."""
    return service.list_cards()


@router.post("", response_model=CardResponse, status_code=status.HTTP_201_CREATED)
async def create_card(
    card_data: CardCreate,
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[CardService, Depends(get_card_service)],
):
    """Create a new card owned by the current user."""
    return service.create_card(user_id, name=card_data.name, link=card_data.link)


@router.delete("/{card_id}", response_model=CardResponse)
async def delete_card(
    card: Annotated[Card, Depends(get_owned_card)],
    service: Annotated[CardService, Depends(get_card_service)],
):
    """Delete a card (owner only). Returns the deleted card."""
    deleted = CardResponse.model_validate(card)
    service.delete_card(card)
    return deleted


@router.put("/{card_id}/likes", response_model=CardResponse)
async def like_card(
    card: Annotated[Card, Depends(get_card_by_path_id)],
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[CardService, Depends(get_card_service)],
):
    """Like a card. Liking an already liked card changes nothing."""
    return service.like_card(card, user_id)


@router.delete("/{card_id}/likes", response_model=CardResponse)
async def unlike_card(
    card: Annotated[Card, Depends(get_card_by_path_id)],
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[CardService, Depends(get_card_service)],
):
    """Remove the current user's like from a card."""
    return service.unlike_card(card, user_id)
