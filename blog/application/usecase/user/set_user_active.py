"""Deactivate / restore user use case (admin)."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.view import UserView
from blog.domain.error import BusinessRuleViolationError
from blog.domain.service import UserService
from blog.domain.value import UserId


class SetUserActiveRequest(BaseModel):
    user_id: str  # Account to change
    active: bool
    admin_id: str  # Admin performing the change


class SetUserActiveResponse(BaseModel):
    user: UserView


class SetUserActiveUseCase:
    """Use case for soft-deleting or restoring an account."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: SetUserActiveRequest) -> SetUserActiveResponse:
        """Execute deactivate/restore flow.

        Raises:
            NotFoundError: If user not found
            BusinessRuleViolationError: If an admin tries to deactivate themself
        """
        if not request.active and request.user_id == request.admin_id:
            raise BusinessRuleViolationError("Admins cannot deactivate themselves")

        user = await self.user_service.set_active(
            UserId(UUID(request.user_id)), request.active
        )
        return SetUserActiveResponse(user=UserView.from_user(user))
