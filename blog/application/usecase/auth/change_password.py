"""Change password use case."""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from blog.domain.service import AuthService
from blog.domain.value import UserId
from blog.util.password import check_password_length


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    user_id: str  # From the verified token
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=8)

    @field_validator("new_password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return check_password_length(v)


class ChangePasswordResponse(BaseModel):
    success: bool
    message: str


class ChangePasswordUseCase:
    """Use case for replacing one's own password."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: ChangePasswordRequest) -> ChangePasswordResponse:
        """Execute change password flow.

        Raises:
            NotFoundError: If the user no longer exists
            AuthenticationError: If the current password is wrong
        """
        await self.auth_service.change_password(
            UserId(UUID(request.user_id)),
            current_password=request.current_password,
            new_password=request.new_password,
        )
        return ChangePasswordResponse(
            success=True, message="Password updated successfully"
        )
