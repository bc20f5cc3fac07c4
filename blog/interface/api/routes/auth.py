"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, ConfigDict, Field, field_validator

from blog.application.usecase.auth import (
    ChangePasswordRequest,
    ChangePasswordUseCase,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from blog.application.usecase.view import UserView
from blog.domain.service import JWTService
from blog.interface.api.auth import BearerCredentials, authenticate
from blog.interface.api.response import ApiResponse, ok
from blog.util.password import check_password_length

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.post(
    "/register",
    response_model=ApiResponse[RegisterResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> ApiResponse[RegisterResponse]:
    """Create an account and log in.

    Example:
        POST /auth/register
        {"email": "ada@example.com", "password": "correct horse", "name": "Ada"}

    Raises:
        ConflictError: If the email is already registered (409)
    """
    result = await register_use_case.execute(request)
    return ok(result, message="Registration successful")


@router.post("/login", response_model=ApiResponse[LoginResponse])
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> ApiResponse[LoginResponse]:
    """Exchange email and password for a bearer token.

    Raises:
        AuthenticationError: Wrong credentials, locked or deactivated account (401)
    """
    result = await login_use_case.execute(request)
    return ok(result, message="Login successful")


@router.get("/me", response_model=ApiResponse[UserView])
async def get_current_user(
    http_request: Request,
    credentials: BearerCredentials,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[UserView]:
    """Get the authenticated user's account."""
    identity = authenticate(http_request, credentials, jwt_service)
    result = await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=identity.user_id)
    )
    return ok(result.user)


class ChangePasswordAPIRequest(BaseModel):
    """Change password body. Accepts camelCase or snake_case keys."""

    model_config = ConfigDict(populate_by_name=True)

    current_password: str = Field(alias="currentPassword", min_length=1)
    new_password: str = Field(alias="newPassword", min_length=8)

    @field_validator("new_password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return check_password_length(v)


@router.put("/change-password", response_model=ApiResponse[None])
async def change_password(
    request: ChangePasswordAPIRequest,
    http_request: Request,
    credentials: BearerCredentials,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[None]:
    """Replace the caller's password.

    Example:
        PUT /auth/change-password
        {"currentPassword": "correct horse", "newPassword": "battery staple"}

    Raises:
        AuthenticationError: Current password is wrong (401)
    """
    identity = authenticate(http_request, credentials, jwt_service)
    result = await change_password_use_case.execute(
        ChangePasswordRequest(
            user_id=identity.user_id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
    )
    return ok(message=result.message)
