"""User profile routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from blog.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from blog.application.usecase.view import PublicUserView, UserView
from blog.domain.service import JWTService
from blog.interface.api.auth import BearerCredentials, authenticate
from blog.interface.api.response import ApiResponse, ok

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for updating user profile."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    bio: Optional[str] = Field(default=None, max_length=500)
    avatar_url: Optional[str] = None


@router.put("/me", response_model=ApiResponse[UserView])
async def update_my_profile(
    http_request: Request,
    request: UpdateUserProfileAPIRequest,
    credentials: BearerCredentials,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[UserView]:
    """Update the current user's profile.

    Example:
        PUT /users/me
        {"bio": "Volatility research, mostly options."}
    """
    identity = authenticate(http_request, credentials, jwt_service)
    result = await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(
            user_id=identity.user_id,
            name=request.name,
            bio=request.bio,
            avatar_url=request.avatar_url,
        )
    )
    return ok(result.user, message="Profile updated")


@router.get("/{user_id}", response_model=ApiResponse[PublicUserView])
async def get_user_profile(
    user_id: UUID,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> ApiResponse[PublicUserView]:
    """Get a user's public profile."""
    result = await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=str(user_id))
    )
    return ok(result.user)
