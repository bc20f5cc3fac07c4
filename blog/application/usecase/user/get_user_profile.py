"""Get user profile use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.view import PublicUserView
from blog.domain.error import NotFoundError
from blog.domain.service import UserService
from blog.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    user_id: str


class GetUserProfileResponse(BaseModel):
    user: PublicUserView


class GetUserProfileUseCase:
    """Use case for viewing a user's public profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If the user does not exist or is deactivated
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        if not user.active:
            raise NotFoundError("User", request.user_id)
        return GetUserProfileResponse(user=PublicUserView.from_user(user))
