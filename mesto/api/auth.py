"""Public sign-up and sign-in endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from mesto.api.dependencies import get_token_service, get_user_service
from mesto.schemas.auth import SigninResponse, UserSignin, UserSignup
from mesto.schemas.user import UserResponse
from mesto.services.auth import TokenService
from mesto.services.users import UserService

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    user_data: UserSignup,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Register a new user."""
    return service.create_user(
        email=user_data.email,
        password=user_data.password,
        name=user_data.name,
        about=user_data.about,
        avatar=user_data.avatar,
    )


@router.post("/signin", response_model=SigninResponse)
async def signin(
    credentials: UserSignin,
    service: Annotated[UserService, Depends(get_user_service)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """Login with email and password."""
    user = service.authenticate(credentials.email, credentials.password)
    return SigninResponse(token=token_service.issue(user.id), user_id=user.id)
