"""User API endpoints. All routes require a bearer token."""

from typing import Annotated

from fastapi import APIRouter, Depends

from mesto.api.dependencies import (
    get_current_user,
    get_current_user_id,
    get_user_by_path_id,
    get_user_service,
)
from mesto.models.user import User
from mesto.schemas.user import UserAvatarUpdate, UserProfileUpdate, UserResponse
from mesto.services.users import UserService

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(get_current_user_id)])


@router.get("", response_model=list[UserResponse])
async def get_users(service: Annotated[UserService, Depends(get_user_service)]):
    """Get all users."""
    return service.list_users()


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: Annotated[User, Depends(get_current_user)]):
    """Get current user information."""
    return current_user


@router.patch("/me", response_model=UserResponse)
async def update_me(
    profile: UserProfileUpdate,
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Update name and about of the current user."""
    return service.update_profile(user_id, name=profile.name, about=profile.about)


@router.patch("/me/avatar", response_model=UserResponse)
async def update_my_avatar(
    avatar_data: UserAvatarUpdate,
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Update the avatar of the current user."""
    return service.update_avatar(user_id, avatar=avatar_data.avatar)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user: Annotated[User, Depends(get_user_by_path_id)]):
    """Get a user by id."""
    return user
