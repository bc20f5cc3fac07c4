"""Register use case."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from blog.application.usecase.view import UserView
from blog.domain.service import AuthService, JWTService
from blog.domain.value import Email
from blog.util.password import check_password_length


class RegisterRequest(BaseModel):
    """Register request."""

    email: Email
    password: str = Field(min_length=8)
    name: str = Field(min_length=1, max_length=100)
    bio: Optional[str] = Field(default=None, max_length=500)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return check_password_length(v)


class RegisterResponse(BaseModel):
    """Register response. The new user is logged in straight away."""

    access_token: str
    token_type: str = "bearer"
    user: UserView


class RegisterUseCase:
    """Use case for creating an account with email and password."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute register flow.

        Raises:
            ConflictError: If the email is already registered
        """
        user = await self.auth_service.register(
            email=request.email,
            password=request.password,
            name=request.name,
            bio=request.bio,
        )
        return RegisterResponse(
            access_token=self.jwt_service.create_token(user),
            user=UserView.from_user(user),
        )
