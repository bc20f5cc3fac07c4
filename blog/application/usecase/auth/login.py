"""Login use case."""

from pydantic import BaseModel, Field

from blog.application.usecase.view import UserView
from blog.domain.service import AuthService, JWTService
from blog.domain.value import Email


class LoginRequest(BaseModel):
    """Login request."""

    email: Email
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    """Login response."""

    access_token: str
    token_type: str = "bearer"
    user: UserView


class LoginUseCase:
    """Use case for logging in with email and password.

    Steps:
    1. Check credentials (locks the account after repeated failures)
    2. Issue a JWT access token
    """

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            AuthenticationError: If credentials are wrong or the account is
                locked or deactivated
        """
        user = await self.auth_service.authenticate(request.email, request.password)
        return LoginResponse(
            access_token=self.jwt_service.create_token(user),
            user=UserView.from_user(user),
        )
