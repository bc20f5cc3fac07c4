"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.view import UserView
from blog.domain.error import AuthenticationError
from blog.domain.service import UserService
from blog.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # From the verified token


class GetCurrentUserResponse(BaseModel):
    user: UserView


class GetCurrentUserUseCase:
    """Use case for loading the authenticated user's own account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            NotFoundError: If the user no longer exists
            AuthenticationError: If the account was deactivated after login
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        if not user.active:
            raise AuthenticationError("Account is deactivated")
        return GetCurrentUserResponse(user=UserView.from_user(user))
