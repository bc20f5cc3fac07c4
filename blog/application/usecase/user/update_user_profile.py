"""Update user profile use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from blog.application.usecase.view import UserView
from blog.domain.service import UserService
from blog.domain.value import UserId


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request. Omitted fields are left unchanged."""

    user_id: str  # From the verified token
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    bio: Optional[str] = Field(default=None, max_length=500)
    avatar_url: Optional[str] = None


class UpdateUserProfileResponse(BaseModel):
    user: UserView


class UpdateUserProfileUseCase:
    """Use case for editing one's own profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)),
            name=request.name,
            bio=request.bio,
            avatar_url=request.avatar_url,
        )
        return UpdateUserProfileResponse(user=UserView.from_user(user))
